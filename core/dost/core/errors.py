class SolveError(Exception):
    """解答処理で発生するエラーの基底クラス"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProblemValidationError(SolveError):
    """問題文が欠けている・空である"""

    status_code = 400


class UnknownProviderError(SolveError):
    """設定された解答プロバイダが存在しない"""
