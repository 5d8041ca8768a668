# -*- coding: utf-8 -*-
"""
Markup helpers shared by the classifier and the extractors.

Pages are parsed once with BeautifulSoup (lxml) and the parsed tree is handed
to every stage; plain strings are accepted everywhere and parsed on demand.
"""
from typing import Union

from bs4 import BeautifulSoup

Markup = Union[str, BeautifulSoup]


def parse_html(markup: Markup) -> BeautifulSoup:
    """Parse markup, or return it unchanged if it is already parsed."""
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup or "", 'lxml')


def page_text(markup: Markup) -> str:
    """Text of <body>, or of the whole document when there is no body."""
    soup = parse_html(markup)
    root = soup.body if soup.body is not None else soup
    return root.get_text()


def title_text(markup: Markup) -> str:
    soup = parse_html(markup)
    if soup.title is None:
        return ""
    return soup.title.get_text().strip()
