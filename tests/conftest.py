# -*- coding: utf-8 -*-
"""
Shared fixtures: saved-page builders and archive trees.
"""
# Standard library
import sys
from pathlib import Path

# Project root (tests/conftest.py → 2 parents)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Third-party
import pytest


VISA_TITLE = "Electronic Diversity Visa Program - Entry Form"


def confirmation_page(name="Jane Doe", number="2025AF1234567890", year="1990"):
    lines = []
    if name is not None:
        lines.append(f"Entrant Name: {name}")
    if number is not None:
        lines.append(f"Confirmation Number: {number}")
    if year is not None:
        lines.append(f"Year of Birth: {year}")
    body = "\n".join(f"<p>{line}</p>" for line in lines)
    return (
        "<html><head><title>Confirmation</title></head>\n"
        f"<body>\n{body}\n</body></html>"
    )


def _card(header, body):
    return (
        f'<div class="card">\n<div class="card-header">{header}</div>\n'
        f'<div class="card-body">\n{body}\n</div>\n</div>'
    )


def visa_page(
    first_name="JANE",
    gender="Female",
    country="Morocco",
    phone="+212 600 000 000",
    email="jane@example.com",
    marital="Married and my spouse is NOT a U.S. citizen or U.S. LPR",
    children="2",
    omit=(),
):
    cards = [
        _card("1. Name", f"a. Last/Family Name\nDOE\nb. First Name\n{first_name}\nc. Middle Name\nNo Middle Name"),
        _card("2. Gender", gender),
        _card("5. Country Where You Were Born", country),
        _card("10. Phone Number", phone),
        _card("11. E-mail Address", f"{email}\nConfirm E-mail: {email}"),
        _card("13. What is your current marital status?", marital),
        _card("14. Number of Children", f"{children}\nChildren listed below"),
    ]
    headers = ["1.", "2.", "5.", "10.", "11.", "13.", "14."]
    kept = [c for c, h in zip(cards, headers) if h not in omit]
    return (
        f"<html><head><title>{VISA_TITLE}</title></head>\n<body>\n"
        + "\n".join(kept)
        + "\n</body></html>"
    )


@pytest.fixture
def make_confirmation():
    return confirmation_page


@pytest.fixture
def make_visa():
    return visa_page


@pytest.fixture
def write_page():
    """Write a page to folder/name, creating folders as needed."""
    def _write(folder: Path, name: str, content: str) -> Path:
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def archive(tmp_path, write_page):
    """
    Two month folders, three applicants, one resource folder each:

        05- SEPTEMBRE/DOE JANE      confirmation + visa
        05- SEPTEMBRE/SMITH JOHN    confirmation only
        06- OCTOBRE/ROE RICHARD     visa only
    """
    root = tmp_path / "extracted"
    jane = root / "05- SEPTEMBRE" / "DOE JANE"
    write_page(jane, "confirmation.html", confirmation_page())
    write_page(jane, "Electronic Diversity Visa Program.html", visa_page())
    write_page(jane / "Electronic Diversity Visa Program_files", "decoy.html",
               confirmation_page(name="Decoy Person"))

    john = root / "05- SEPTEMBRE" / "SMITH JOHN"
    write_page(john, "confirmation.htm", confirmation_page(name="John Smith", number="999", year="1985"))

    richard = root / "06- OCTOBRE" / "ROE RICHARD"
    write_page(richard, "application.html", visa_page(first_name="RICHARD", gender="Male"))
    write_page(richard / "application_fichiers", "style.html", "<html></html>")
    return root
