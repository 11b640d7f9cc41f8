from decimal import Decimal


class CurrencyConverter:
    """通貨換算（固定レートのスタブ）

    外部の為替レート取得は行わない。
    """

    USD_TO_EUR_RATE = Decimal("0.8")

    def to_euro(self, amount_usd: Decimal) -> Decimal:
        """米ドル建ての金額をユーロに換算する"""
        return amount_usd * self.USD_TO_EUR_RATE
