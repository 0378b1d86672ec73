import math
import re
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Union

from treko.schemas.product_schema import Product, ProductIn

# leading decimal number, the rest of the text is ignored ("12.5abc" -> 12.5)
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class FormDraft:
    nome: str = ""
    descricao: str = ""
    preco_text: str = ""


@dataclass(frozen=True)
class Creating:
    draft: FormDraft = field(default_factory=FormDraft)


@dataclass(frozen=True)
class Editing:
    target_id: int
    draft: FormDraft


FormMode = Union[Creating, Editing]


def parse_price(text) -> float:
    """
    Parse the price field the way a browser float parse does: take the leading
    number and ignore trailing junk. Anything unparsable, NaN or infinite is 0.0,
    which the ``> 0`` rule then rejects.
    """
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        m = _LEADING_NUMBER.match(text or "")
        value = float(m.group(1)) if m else 0.0
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def price_text(preco: float) -> str:
    # exact value, only a trailing ".0" dropped (20.0 -> "20", 12.3456 -> "12.3456")
    text = repr(float(preco))
    return text[:-2] if text.endswith(".0") else text


def validate(draft: FormDraft) -> Optional[ProductIn]:
    """Payload for a valid draft (non-blank name, price > 0), else None."""
    nome = draft.nome.strip()
    preco = parse_price(draft.preco_text)
    if not nome or preco <= 0:
        return None
    return ProductIn(nome=nome, descricao=draft.descricao or None, preco=preco)


class EditModeController:
    """
    Holds the form mode: ``Creating(draft)`` or ``Editing(target_id, draft)``.
    ``on_start_edit`` is called with the product after switching to edit mode
    (the UI uses it to bring the form into view).
    """

    def __init__(self, on_start_edit: Optional[Callable[[Product], None]] = None):
        self.mode: FormMode = Creating()
        self.on_start_edit = on_start_edit

    @property
    def draft(self) -> FormDraft:
        return self.mode.draft

    @property
    def is_editing(self) -> bool:
        return isinstance(self.mode, Editing)

    @property
    def target_id(self) -> Optional[int]:
        return self.mode.target_id if isinstance(self.mode, Editing) else None

    @property
    def title(self) -> str:
        return "Editar Produto" if self.is_editing else "Cadastrar Produto"

    @property
    def submit_label(self) -> str:
        return "Atualizar" if self.is_editing else "Cadastrar"

    def start_edit(self, product: Product) -> None:
        draft = FormDraft(
            nome=product.nome,
            descricao=product.descricao or "",
            preco_text=price_text(product.preco),
        )
        self.mode = Editing(target_id=product.id, draft=draft)
        if self.on_start_edit:
            self.on_start_edit(product)

    def cancel_edit(self) -> None:
        self.mode = Creating()

    def update_draft(self, **fields) -> FormDraft:
        unknown = set(fields) - {"nome", "descricao", "preco_text"}
        if unknown:
            raise ValueError(f"Unknown form fields: {sorted(unknown)}")
        self.mode = replace(self.mode, draft=replace(self.mode.draft, **fields))
        return self.mode.draft

    def forget(self, product_id: int) -> bool:
        """Drop the edit session if it points at ``product_id``."""
        if self.target_id == product_id:
            self.cancel_edit()
            return True
        return False
