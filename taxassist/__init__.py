"""TaxAssist — Indian income-tax chat assistant backend."""
