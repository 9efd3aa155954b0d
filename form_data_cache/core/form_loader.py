"""Reads the configured form files into memory."""

from __future__ import annotations

import logging
import os
from typing import Union

from .types import FORM_FILE_NAMES, FormId, FormLoadResult, LoadReport, LoadStatus, form_key

logger = logging.getLogger(__name__)


def read_form_file(path: str) -> str:
    """Read a form file, joining its lines without their terminators.

    Bytes that are not valid UTF-8 become U+FFFD rather than failing the read.
    """
    with open(path, "r", encoding="utf-8", errors="replace", newline=None) as handle:
        return "".join(line.rstrip("\n") for line in handle)


def load_form(form_id: FormId, base_path: str) -> tuple[FormLoadResult, Union[str, None]]:
    key = form_key(form_id)
    path = base_path + os.sep + FORM_FILE_NAMES[form_id]
    try:
        content = read_form_file(path)
    except FileNotFoundError as exc:
        logger.warning("Form file %s not found for %s", path, form_id.value)
        return FormLoadResult(form_id, key, path, LoadStatus.MISSING, str(exc)), None
    except OSError as exc:
        logger.warning("Could not read form file %s for %s: %s", path, form_id.value, exc)
        return FormLoadResult(form_id, key, path, LoadStatus.UNREADABLE, str(exc)), None
    except Exception as exc:
        logger.exception("Unexpected error reading form file %s", path)
        return FormLoadResult(form_id, key, path, LoadStatus.UNREADABLE, str(exc)), None

    logger.debug("Loaded %s from %s (%d chars)", form_id.value, path, len(content))
    return FormLoadResult(form_id, key, path, LoadStatus.LOADED, length=len(content)), content


def load_all_forms(app_id: str, base_path: Union[str, None]) -> tuple[dict[str, str], LoadReport]:
    """Load every known form from ``base_path``.

    A failure on one file never stops the others; each outcome is recorded in
    the returned report and only successfully read files get a cache entry.
    When ``base_path`` is None nothing is read and every form is reported as
    ``NO_APP_PATH``.
    """
    data: dict[str, str] = {}
    results: dict[FormId, FormLoadResult] = {}

    if base_path is None:
        logger.warning("No application path for %r; no forms loaded", app_id)
        for form_id in FormId:
            results[form_id] = FormLoadResult(
                form_id,
                form_key(form_id),
                None,
                LoadStatus.NO_APP_PATH,
                f"application path not found for {app_id!r}",
            )
        return data, LoadReport(app_id=app_id, base_path=None, results=results)

    logger.info("Loading form data for %r from %s", app_id, base_path)
    for form_id in FormId:
        result, content = load_form(form_id, base_path)
        results[form_id] = result
        if content is not None:
            data[result.key] = content

    report = LoadReport(app_id=app_id, base_path=base_path, results=results)
    logger.info("Loaded %d of %d forms", len(report.loaded), len(results))
    return data, report
