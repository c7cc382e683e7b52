"""
responses.py — Static answer content for the chat resolver.

CANNED_RESPONSES is an ordered tuple, not a dict: the resolver walks it in
order and the first matching topic wins, so the order is part of behaviour.
Keys are lowercase.
"""
from __future__ import annotations

CALCULATOR_ACK = (
    "I'll help you calculate your tax! Please use the calculator below "
    "to get your exact tax liability."
)

WELCOME_MESSAGE = (
    "👋 Hello! I'm your Income Tax Assistant powered by AI. I can help you with:\n\n"
    "• Tax calculations and slabs\n"
    "• Deduction suggestions\n"
    "• ITR filing guidance\n"
    "• Tax regime comparison\n"
    "• Common tax terms\n"
    "• And ANY other questions you have!\n\n"
    "💡 For the best experience, set up your OpenAI API key using the settings button.\n\n"
    "What would you like to know today?"
)

ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."

# (label, message): sent exactly as if the user typed the message
QUICK_ACTIONS: tuple[tuple[str, str], ...] = (
    ("Calculate Tax", "calculate my tax"),
    ("Tax Slabs", "explain tax slabs"),
    ("Deductions", "what deductions can I claim"),
    ("ITR Filing", "how to file ITR"),
)

# ---------------------------------------------------------------------------
# Canned topic table
# ---------------------------------------------------------------------------

SLABS_RESPONSE = """Here are the current tax slabs for India:

🆕 **New Tax Regime (2023-24):**
• Up to ₹3,00,000: 0% tax
• ₹3,00,001 - ₹6,00,000: 5% tax
• ₹6,00,001 - ₹9,00,000: 10% tax
• ₹9,00,001 - ₹12,00,000: 15% tax
• ₹12,00,001 - ₹15,00,000: 20% tax
• Above ₹15,00,000: 30% tax

🔄 **Old Tax Regime:**
• Up to ₹2,50,000: 0% tax
• ₹2,50,001 - ₹5,00,000: 5% tax
• ₹5,00,001 - ₹10,00,000: 20% tax
• Above ₹10,00,000: 30% tax

💡 The new regime has higher exemption limits but doesn't allow most deductions."""

DEDUCTIONS_RESPONSE = """Here are major deductions under the Old Tax Regime:

💳 **Section 80C (up to ₹1,50,000):**
• EPF, PPF contributions
• Life insurance premiums
• ELSS mutual funds
• NSC, Tax-saving FDs
• Home loan principal repayment

🏥 **Section 80D (Medical Insurance):**
• Self & family: ₹25,000
• Parents (below 60): ₹25,000
• Parents (above 60): ₹50,000

🏠 **Section 80EE/80EEA (Home Loan Interest):**
• First-time buyers: ₹50,000 additional

📚 **Section 80E (Education Loan Interest):**
• Full interest amount (no limit)

💡 Remember: New tax regime doesn't allow these deductions but has lower tax rates!"""

ITR_FILING_RESPONSE = """Here's how to file your Income Tax Return:

🌐 **Online Filing (Recommended):**
1. Visit incometax.gov.in
2. Register/Login with PAN
3. Select appropriate ITR form:
   • ITR-1: Salary, pension, house property
   • ITR-2: Multiple sources, capital gains
   • ITR-3: Business/profession income

📋 **Required Documents:**
• Form 16 (from employer)
• Bank statements
• Investment proofs
• TDS certificates

📅 **Important Dates:**
• July 31: Due date for salaried individuals
• October 31: For audit cases
• December 31: Revised return deadline

💡 **Pro Tips:**
• File early to avoid last-minute rush
• Keep all documents ready
• Verify return within 120 days

Need help with a specific form or section?"""

TDS_RESPONSE = """**Tax Deducted at Source (TDS)** is tax collected in advance:

💼 **Common TDS Scenarios:**
• Salary: Employer deducts based on tax slab
• Interest: 10% on bank/FD interest > ₹40,000
• Professional fees: 10% on payments > ₹30,000
• Rent: 10% on rent > ₹2,40,000/year

📄 **Form 16:** TDS certificate from employer
📄 **Form 16A:** TDS certificate for non-salary income

💡 **Key Points:**
• TDS is advance tax payment
• Claim refund if TDS > actual tax liability
• Submit Form 15G/15H to avoid TDS if income below taxable limit"""

PAN_RESPONSE = """**PAN (Permanent Account Number)** is essential for tax compliance:

📝 **What is PAN?**
• 10-digit alphanumeric identifier
• Required for all financial transactions
• Links all tax-related activities

🆔 **PAN Format:** ABCDE1234F
• First 5: Letters
• Next 4: Numbers
• Last 1: Letter

💼 **When PAN is Mandatory:**
• ITR filing
• Opening bank account
• Investments above ₹50,000
• Property transactions
• High-value purchases

📱 **How to Apply:**
• Online: nsdl.co.in or utiitsl.co.in
• Offline: PAN centers
• Documents: Identity & address proof

⚠️ **Important:** Having multiple PANs is illegal!"""

FORM16_RESPONSE = """**Form 16** is your annual TDS certificate:

📄 **What it Contains:**
• Your PAN and employer's TAN
• Total salary paid
• Tax deducted (TDS)
• Quarterly TDS details
• Investment declarations

🗓️ **When You Get It:**
• Employer must provide by June 15
• For the previous financial year

📝 **Two Parts:**
• Part A: TDS deduction details
• Part B: Salary breakdown, deductions

💡 **Uses:**
• Essential for ITR filing
• Proof of tax payment
• Loan applications
• Visa processing

❌ **If Not Received:**
• Request from HR/accounts
• Download from employer portal
• File ITR with salary certificate + bank statements

🔍 **Verify Details:** Check PAN, salary amounts, and TDS for accuracy!"""

# The deductions topic is keyed "deductions i can claim" rather than the quick
# action text: a key whose first word is "what" would capture every "what ..."
# question before it could reach a provider.
CANNED_RESPONSES: tuple[tuple[str, str], ...] = (
    (
        "calculate my tax",
        "I'll help you calculate your tax liability! Please use the calculator "
        "below to enter your income details.",
    ),
    ("explain tax slabs", SLABS_RESPONSE),
    ("deductions i can claim", DEDUCTIONS_RESPONSE),
    ("how to file itr", ITR_FILING_RESPONSE),
    ("tds", TDS_RESPONSE),
    ("pan card", PAN_RESPONSE),
    ("form 16", FORM16_RESPONSE),
)

# ---------------------------------------------------------------------------
# Keyword rules: checked after the canned table, in order
# ---------------------------------------------------------------------------

SECTION_80C_RESPONSE = (
    "Section 80C allows deductions up to ₹1,50,000 for investments like EPF, PPF, "
    "life insurance, ELSS mutual funds, and home loan principal repayment. "
    "This is only available in the old tax regime."
)

SECTION_80D_RESPONSE = (
    "Section 80D provides deductions for health insurance premiums:\n"
    "• Self & family: ₹25,000\n"
    "• Parents under 60: ₹25,000\n"
    "• Parents over 60: ₹50,000\n"
    "• Preventive health check-up: ₹5,000 additional"
)

REGIME_COMPARISON_RESPONSE = """**Tax Regime Comparison:**

🆕 **New Regime:**
✅ Lower tax rates, higher exemption limit
❌ No deductions (except few like standard deduction)
👥 Good for: Those with minimal deductions

🔄 **Old Regime:**
✅ Multiple deductions available (80C, 80D, etc.)
❌ Higher tax rates, lower exemption limit
👥 Good for: Those with significant deductions

💡 **Tip:** Calculate tax under both regimes and choose the beneficial one!"""

# (required substrings: all must be present, response)
KEYWORD_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("80c",), SECTION_80C_RESPONSE),
    (("80d",), SECTION_80D_RESPONSE),
    (("new", "old", "regime"), REGIME_COMPARISON_RESPONSE),
)

# ---------------------------------------------------------------------------
# Provider context and generic fallback
# ---------------------------------------------------------------------------

SYSTEM_CONTEXT = (
    "You are a helpful Income Tax Assistant for India. Provide accurate, helpful "
    "responses about Indian income tax, deductions, tax slabs, ITR filing, and "
    "related topics. Use emojis and format your responses clearly. If the question "
    "is not tax-related, politely redirect to tax topics while still being helpful."
)

FALLBACK_TOPICS = """I'd be happy to help with that! Here are some topics I can assist you with:

💰 Tax calculations and slabs
📊 Deduction optimization (80C, 80D, etc.)
📝 ITR filing process
🔄 Tax regime comparison
📚 Tax terminology (PAN, TDS, Form 16, etc.)
📅 Important tax dates and deadlines"""

SETUP_KEY_HINT = (
    "💡 **Tip:** Set up your AI API key in settings to get answers to ANY question!"
)

FALLBACK_CLOSING = (
    "Could you please be more specific about what you'd like to know? You can also "
    "use the quick action buttons below for common queries."
)


def build_fallback() -> str:
    """Generic answer listing supported topics, with the configure-a-key tip."""
    return f"{FALLBACK_TOPICS}\n\n{SETUP_KEY_HINT}\n\n{FALLBACK_CLOSING}"
