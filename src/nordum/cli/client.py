"""
HTTP client for the Nordum API.
"""

from urllib.parse import quote

import httpx

from nordum import config


def _http() -> httpx.Client:
    return httpx.Client(base_url=config.get_settings().api_url.rstrip("/"), timeout=30)


def search(query: str, filter: str = "all") -> list[dict]:
    with _http() as http:
        r = http.get("/api/search", params={"q": query, "filter": filter})
        r.raise_for_status()
        return r.json()["results"]


def words_by_letter(letter: str) -> list[dict]:
    with _http() as http:
        r = http.get(f"/api/letters/{quote(letter, safe='')}")
        r.raise_for_status()
        return r.json()["results"]


def get_entry(key: str) -> dict:
    with _http() as http:
        r = http.get(f"/api/entries/{quote(key, safe='')}")
        r.raise_for_status()
        return r.json()


def spell_check(text: str) -> dict:
    with _http() as http:
        r = http.post("/api/spellcheck", json={"text": text})
        r.raise_for_status()
        return r.json()


def stats() -> dict:
    with _http() as http:
        r = http.get("/api/stats")
        r.raise_for_status()
        return r.json()


def reload() -> dict:
    with _http() as http:
        r = http.post("/api/reload")
        r.raise_for_status()
        return r.json()
