from fastapi import APIRouter

from ..nlp.parser import parse
from ..schemas import ParsedTask, ParseIn

router = APIRouter()


@router.post("", response_model=ParsedTask)
async def parse_text(payload: ParseIn):
    return parse(payload.text, now=payload.now)
