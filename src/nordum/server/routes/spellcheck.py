"""
Spell check routes: /api/spellcheck
"""

from fastapi import APIRouter
from pydantic import BaseModel

from nordum.server.deps import get_lexicon


router = APIRouter(prefix="/api/spellcheck", tags=["spellcheck"])


class SpellCheckRequest(BaseModel):
    text: str


@router.post("")
async def spell_check(req: SpellCheckRequest):
    """Flag unknown words and suggest corrections."""
    result = get_lexicon().spell_check(req.text)
    return result.to_dict()
