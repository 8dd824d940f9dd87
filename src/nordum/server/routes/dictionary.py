"""
Dictionary routes: /api/search, /api/letters, /api/entries, /api/stats
"""

from fastapi import APIRouter, HTTPException

from nordum import config
from nordum.core.errors import DictionaryUnavailable, InvalidFilter, MalformedEntry
from nordum.core.search import SearchFilter
from nordum.server.deps import get_lexicon


router = APIRouter(prefix="/api", tags=["dictionary"])


@router.get("/search")
async def search(q: str = "", filter: str = "all"):
    """Ranked substring search."""
    try:
        scope = SearchFilter.parse(filter)
    except InvalidFilter as e:
        raise HTTPException(status_code=400, detail=str(e))

    results = get_lexicon().search(q, scope)
    return {
        "query": q,
        "filter": scope.value,
        "results": [e.to_dict() for e in results],
    }


@router.get("/letters/{letter}")
async def words_by_letter(letter: str):
    """Entries starting with a letter, alphabetical."""
    results = get_lexicon().words_by_letter(letter)
    return {
        "letter": letter.lower(),
        "results": [e.to_dict() for e in results],
    }


@router.get("/entries/{key}")
async def get_entry(key: str):
    entry = get_lexicon().lookup(key)
    if not entry:
        raise HTTPException(status_code=404, detail="Entry not found")
    return entry.to_dict()


@router.get("/stats")
async def stats():
    """Dictionary metadata and coverage by part of speech."""
    index = get_lexicon().index
    return {
        "metadata": index.metadata.to_dict(),
        "counts": index.counts_by_pos(),
        "letters": index.letters(),
    }


@router.post("/reload")
async def reload():
    """Reload the configured dictionary file. On failure the current index is kept."""
    path = config.get_settings().dictionary
    try:
        index = get_lexicon().reload(path)
    except (MalformedEntry, DictionaryUnavailable) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "entry_count": len(index)}
