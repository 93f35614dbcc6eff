from motoparts.utils.sanitization import (
    sanitize_email,
    sanitize_name,
    sanitize_phone,
    sanitize_search,
    sanitize_sku,
    sanitize_text,
)


def test_sanitize_text_strips_tags_and_truncates():
    assert sanitize_text("  <b>Brake</b> pad  ") == "Brake pad"
    assert sanitize_text("x" * 20, max_length=5) == "xxxxx"
    assert sanitize_text(None) == ""


def test_sanitize_name_caps_length():
    assert len(sanitize_name("a" * 300)) == 100


def test_sanitize_sku_uppercases_and_filters():
    assert sanitize_sku(" bp-100/a b ") == "BP-100/AB"


def test_sanitize_phone_keeps_dial_characters():
    assert sanitize_phone("+92 (300) 123-4567x") == "+92 (300) 123-4567"


def test_sanitize_email_lowercases_and_removes_spaces():
    assert sanitize_email(" Owner@Shop.PK ") == "owner@shop.pk"


def test_sanitize_search_keeps_inner_spaces():
    assert sanitize_search("  cd 70  ") == "cd 70"
