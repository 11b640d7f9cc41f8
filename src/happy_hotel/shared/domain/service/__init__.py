from .currency_converter import CurrencyConverter

__all__ = ["CurrencyConverter"]
