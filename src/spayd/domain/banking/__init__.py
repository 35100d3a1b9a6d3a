"""Banking domain package.

This package contains the account identifier model: the payee bank
account value object and Czech IBAN composition.
"""
