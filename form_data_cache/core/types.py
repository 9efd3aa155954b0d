from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class FormId(str, Enum):
    IT201 = "IT201"
    IT201V = "IT201V"
    IT214 = "IT214"
    W2 = "W2"
    DEPEXEMPT = "DEPEXEMPT"
    HMBR = "HMBR"
    PAYMENT = "PAYMENT"


class LoadStatus(str, Enum):
    LOADED = "loaded"
    MISSING = "missing"
    UNREADABLE = "unreadable"
    NO_APP_PATH = "no_app_path"


FORM_KEYS: dict[FormId, str] = {
    FormId.IT201: "it201",
    FormId.IT201V: "it201v",
    FormId.IT214: "it214",
    FormId.W2: "w2",
    FormId.DEPEXEMPT: "depexempt",
    FormId.HMBR: "hmbr",
    FormId.PAYMENT: "payment",
}

FORM_FILE_NAMES: dict[FormId, str] = {
    FormId.IT201: "IT201.xml",
    FormId.IT201V: "IT201V.xml",
    FormId.IT214: "IT214.xml",
    FormId.W2: "W2.xml",
    FormId.DEPEXEMPT: "DEPEXEMPT.xml",
    FormId.HMBR: "HMBR.xml",
    FormId.PAYMENT: "Payment.xml",
}


def form_key(form_id: FormId) -> str:
    """Return the resource key a form's content is cached under."""
    return FORM_KEYS[FormId(form_id)]


@dataclass(frozen=True)
class FormLoadResult:
    form_id: FormId
    key: str
    path: Union[str, None]
    status: LoadStatus
    error: str = ""
    length: int = 0

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.LOADED


@dataclass(frozen=True)
class LoadReport:
    app_id: str
    base_path: Union[str, None]
    results: dict[FormId, FormLoadResult] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return bool(self.results) and all(r.ok for r in self.results.values())

    @property
    def loaded(self) -> list[FormLoadResult]:
        return [r for r in self.results.values() if r.ok]

    @property
    def failed(self) -> list[FormLoadResult]:
        return [r for r in self.results.values() if not r.ok]

    def result_for(self, form_id: FormId) -> Union[FormLoadResult, None]:
        return self.results.get(FormId(form_id))
