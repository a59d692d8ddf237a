"""ドメイン層の例外定義."""


class DomainError(Exception):
    """ドメイン層エラーの基底クラス."""


class InvalidComparisonStateError(DomainError):
    """無効な選挙区比較からバイアスを読み出そうとした場合のエラー.

    呼び出し側が is_valid を確認せずに bias を参照したことを示す。
    """

    def __init__(self, constituency_name: str) -> None:
        super().__init__(
            f"選挙区 '{constituency_name}' は比較できません: データ不足"
        )
        self.constituency_name = constituency_name
