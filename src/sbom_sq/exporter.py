from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import get_settings
from .errors import ExportError
from .models import Document

LOGGER = logging.getLogger(__name__)

EXPORT_HEADERS = ["Name", "Spdxid", "Version", "License", "Copyright"]
EXTENSIONS = {"csv": ".csv", "html": ".html"}


def package_rows(document: Document) -> List[List[str]]:
    return [
        [pkg.name, pkg.spdx_id, pkg.version, pkg.license_concluded, pkg.copyright_text]
        for pkg in document.packages
    ]


def export_csv(document: Document, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh)
        writer.writerow(EXPORT_HEADERS)
        writer.writerows(package_rows(document))
    LOGGER.info("wrote %d package rows to %s", len(document.packages), output_path)
    return output_path


def export_html(document: Document, output_path: Path, templates_dir: Optional[Path] = None) -> Path:
    env = Environment(
        loader=FileSystemLoader(templates_dir or get_settings().templates_dir),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template("export.html.j2")
    rendered = template.render(
        document_name=document.name,
        headers=EXPORT_HEADERS,
        rows=package_rows(document),
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        fh.write(rendered)
    LOGGER.info("wrote HTML export to %s", output_path)
    return output_path


def is_valid_output_file(output: Path, fmt: str) -> bool:
    expected = EXTENSIONS.get(fmt)
    return expected is not None and output.suffix == expected


def export_document(
    document: Document,
    fmt: str,
    output: Path,
    report_dir: Optional[Path] = None,
) -> Path:
    """Write ``document``'s package rows under the report directory.

    An absolute ``output`` is re-rooted under the report directory.
    """
    fmt = fmt.strip().lower()
    if fmt not in EXTENSIONS:
        raise ExportError(f"unsupported format: {fmt}")

    if output.is_absolute():
        output = output.relative_to(output.anchor)
    target = (report_dir or get_settings().report_dir) / output
    if not is_valid_output_file(target, fmt):
        raise ExportError(f"Output file extension doesn't match format {fmt}")

    if fmt == "csv":
        return export_csv(document, target)
    return export_html(document, target)
