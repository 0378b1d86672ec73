import pytest

from treko.schemas.product_schema import Product
from treko.services.edit_mode import (
    Creating,
    EditModeController,
    Editing,
    FormDraft,
    parse_price,
    validate,
)

CANETA = Product(id=1, nome="Caneta", descricao="Azul", preco=2.5)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("19.99", 19.99),
        ("  3", 3.0),
        ("12.5abc", 12.5),
        (".5", 0.5),
        ("1e2", 100.0),
        ("-4", -4.0),
        ("abc", 0.0),
        ("", 0.0),
        ("nan", 0.0),
        ("1e999", 0.0),
        (2.5, 2.5),
    ],
)
def test_parse_price(text, expected):
    assert parse_price(text) == expected


@pytest.mark.parametrize("preco_text", ["0", "-1", "abc", "", "0.00", "NaN"])
def test_validate_rejects_non_positive_or_unparsable_price(preco_text):
    assert validate(FormDraft(nome="Caneta", preco_text=preco_text)) is None


def test_validate_rejects_blank_name():
    assert validate(FormDraft(nome="   ", preco_text="2")) is None


def test_validate_builds_payload():
    payload = validate(FormDraft(nome=" Caneta ", descricao="", preco_text="2.50"))
    assert payload.nome == "Caneta"
    assert payload.descricao is None
    assert payload.preco == 2.5


def test_start_edit_mirrors_product():
    seen = []
    form = EditModeController(on_start_edit=seen.append)
    assert form.mode == Creating()
    form.start_edit(CANETA)
    assert form.mode == Editing(target_id=1, draft=FormDraft("Caneta", "Azul", "2.5"))
    assert form.is_editing and form.target_id == 1
    assert (form.title, form.submit_label) == ("Editar Produto", "Atualizar")
    assert seen == [CANETA]


def test_start_edit_keeps_exact_price():
    form = EditModeController()
    form.start_edit(Product(id=2, nome="Caderno", preco=20.0))
    assert form.draft.preco_text == "20"
    assert form.draft.descricao == ""

    for preco in (12.3456, 0.004, 19.99):
        form.start_edit(Product(id=3, nome="Clipe", preco=preco))
        assert parse_price(form.draft.preco_text) == preco
        assert validate(form.draft).preco == preco


def test_cancel_edit_resets_draft():
    form = EditModeController()
    form.start_edit(CANETA)
    form.update_draft(nome="Caneta vermelha")
    form.cancel_edit()
    assert form.mode == Creating(FormDraft())
    assert form.target_id is None
    assert (form.title, form.submit_label) == ("Cadastrar Produto", "Cadastrar")


def test_update_draft_keeps_mode():
    form = EditModeController()
    form.update_draft(nome="Lápis", preco_text="1")
    assert form.mode == Creating(FormDraft(nome="Lápis", preco_text="1"))

    form.start_edit(CANETA)
    form.update_draft(preco_text="3")
    assert form.target_id == 1
    assert form.draft == FormDraft("Caneta", "Azul", "3")

    with pytest.raises(ValueError):
        form.update_draft(preco="3")


def test_only_one_edit_target_at_a_time():
    form = EditModeController()
    form.start_edit(CANETA)
    form.start_edit(Product(id=2, nome="Caderno", preco=20.0))
    assert form.target_id == 2
    assert form.draft.nome == "Caderno"


def test_forget_only_clears_matching_target():
    form = EditModeController()
    form.start_edit(CANETA)
    assert form.forget(99) is False
    assert form.target_id == 1
    assert form.forget(1) is True
    assert form.mode == Creating()
