"""Email値オブジェクトのテスト."""
import pytest

from berufsorientierung.domain.value_objects import Email


class TestEmail:
    """Emailのテスト."""

    def test_空白を除き小文字に正規化する(self):
        assert Email("  Anna.Schmidt@Example.DE ").value == "anna.schmidt@example.de"

    def test_大文字小文字が違っても同じアドレス(self):
        assert Email("ANNA@example.com") == Email("anna@example.com")

    @pytest.mark.parametrize("value", ["", "   ", "anna", "anna@example", "anna@@example.com"])
    def test_不正な形式はエラー(self, value):
        with pytest.raises(ValueError):
            Email(value)
