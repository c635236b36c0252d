# src/opensrfiview/logic/srfi_urls.py

from __future__ import annotations

SRFI_SITE = "https://srfi.schemers.org/"
SRFI_MAIL_ARCHIVE = "https://srfi-email.schemers.org/"
SRFI_GITHUB = "https://github.com/scheme-requests-for-implementation/"


def document_url(number: int) -> str:
    """SRFI 本文（HTML）の URL。"""
    return f"{SRFI_SITE}srfi-{number}/srfi-{number}.html"


def landing_page_url(number: int) -> str:
    """SRFI ごとのトップページ（ディレクトリ）の URL。"""
    return f"{SRFI_SITE}srfi-{number}/"


def discussion_url(number: int) -> str:
    """メーリングリストのアーカイブ。"""
    return f"{SRFI_MAIL_ARCHIVE}srfi-{number}/"


def repository_url(number: int) -> str:
    return f"{SRFI_GITHUB}srfi-{number}"


def home_page_url() -> str:
    return SRFI_SITE
