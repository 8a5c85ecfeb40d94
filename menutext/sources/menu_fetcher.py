# menutext/sources/menu_fetcher.py
"""
Menu Fetcher: finds the daily menu PDFs linked from the restaurant site
and downloads them.

The site lists one link per menu in the first column of `#table2`; each
href is a bare "<name>.pdf" served from the site root.
"""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

log = logging.getLogger(__name__)

MENU_LINK_SELECTOR = "#table2 td:first-child > p a"
USER_AGENT = {"User-Agent": "menutext/0.1 (+menu republisher)"}


class FetchError(Exception):
    """Site page or PDF could not be fetched."""


def menu_name_from_href(href: str) -> str:
    """'/menus/Monday.pdf' -> 'Monday'."""
    path = urlparse(href.strip()).path or href.strip()
    name = path.rsplit("/", 1)[-1]
    if name.lower().endswith(".pdf"):
        name = name[:-4]
    return name


def parse_menu_names(html: str) -> List[str]:
    soup = BeautifulSoup(html, "html.parser")
    names: List[str] = []
    for a in soup.select(MENU_LINK_SELECTOR):
        href = (a.get("href") or "").strip()
        if not href:
            continue
        name = menu_name_from_href(href)
        if name and name not in names:
            names.append(name)
    return names


class MenuFetcher:
    def __init__(self, site_url: str, timeout: int = 30,
                 session: Optional[requests.Session] = None):
        self.site_url = site_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(USER_AGENT)

    def _get(self, url: str) -> requests.Response:
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"GET {url} failed: {e}") from e
        return resp

    def pdf_url(self, name: str) -> str:
        return f"{self.site_url}/{name}.pdf"

    def list_menu_names(self) -> List[str]:
        resp = self._get(self.site_url)
        names = parse_menu_names(resp.text)
        log.info("found %d menu link(s) on %s", len(names), self.site_url)
        return names

    def download(self, name: str) -> bytes:
        url = self.pdf_url(name)
        log.info("downloading %s", url)
        return self._get(url).content
