"""定期実行バッチモジュール."""
