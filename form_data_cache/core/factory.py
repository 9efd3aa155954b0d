"""Process-wide cache of form XML templates."""

from __future__ import annotations

import logging
import os
import threading
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .app_paths import DEFAULT_APP_ID, resolve_path
from .form_loader import load_all_forms
from .types import FormId, LoadReport, form_key

logger = logging.getLogger(__name__)

PathResolver = Callable[[str], Optional[str]]


class FormDataFactory:
    """Loads every form file once and serves the contents by ``FormId``.

    Use ``FormDataFactory.get_instance()`` for the shared instance. Direct
    construction builds an independent, fully loaded cache from the given
    settings.
    """

    _instance: Optional["FormDataFactory"] = None
    _lock = threading.Lock()
    _app_id: Optional[str] = None
    _resolver: Optional[PathResolver] = None

    def __init__(self, app_id: Optional[str] = None, resolver: Optional[PathResolver] = None) -> None:
        self._application_id = app_id or DEFAULT_APP_ID
        self._path_resolver = resolver or resolve_path
        data, report = self._load()
        self._data: Mapping[str, str] = MappingProxyType(data)
        self._report = report

    def _load(self) -> tuple[dict[str, str], LoadReport]:
        try:
            base_path = self._path_resolver(self._application_id)
        except Exception:
            logger.exception("Path resolution failed for %r", self._application_id)
            base_path = None
        return load_all_forms(self._application_id, base_path)

    @classmethod
    def get_instance(cls) -> "FormDataFactory":
        instance = cls._instance
        if instance is None:
            with cls._lock:
                instance = cls._instance
                if instance is None:
                    app_id = cls._app_id
                    if app_id is None:
                        app_id = os.environ.get("FORM_DATA_APP_ID", "").strip()
                    instance = cls(app_id=app_id, resolver=cls._resolver)
                    cls._instance = instance
        return instance

    @classmethod
    def configure(cls, app_id: Optional[str] = None, resolver: Optional[PathResolver] = None) -> None:
        """Set the settings the shared instance will be built with."""
        with cls._lock:
            if cls._instance is not None:
                logger.warning("FormDataFactory already initialized; configuration ignored")
                return
            if app_id is not None:
                cls._app_id = app_id
            if resolver is not None:
                cls._resolver = resolver

    @classmethod
    def set_application_id(cls, app_id: str) -> None:
        if cls._instance is not None:
            logger.warning(
                "Application id set to %r after form data was loaded for %r",
                app_id,
                cls._instance.application_id,
            )
        cls._app_id = app_id

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance and its settings. Intended for tests."""
        with cls._lock:
            cls._instance = None
            cls._app_id = None
            cls._resolver = None

    @property
    def application_id(self) -> str:
        return self._application_id

    @property
    def base_path(self) -> Optional[str]:
        return self._report.base_path

    @property
    def load_report(self) -> LoadReport:
        return self._report

    def get_form_data(self, form_id: FormId) -> str:
        """Return the cached form content, or ``""`` if it did not load."""
        return self._data.get(form_key(form_id), "")

    def has_form_data(self, form_id: FormId) -> bool:
        return form_key(form_id) in self._data


def get_instance() -> FormDataFactory:
    return FormDataFactory.get_instance()


def set_application_id(app_id: str) -> None:
    FormDataFactory.set_application_id(app_id)


def get_form_data(form_id: FormId) -> str:
    return FormDataFactory.get_instance().get_form_data(form_id)
