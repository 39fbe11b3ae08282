from typing import List, NamedTuple

import requests
import structlog
from django.conf import settings
from django.core.cache import caches

from ..config import TEXT_CACHE_ALIAS, TEXT_CACHE_KEY
from ..errors import QuranTextUnavailable

logger = structlog.get_logger()


class AyahText(NamedTuple):
    number_in_surah: int
    arabic: str
    transliteration: str


def _fetch_edition(surah_id, edition):
    url = f"{settings.QURAN_API_BASE_URL}/surah/{surah_id}/{edition}"
    try:
        resp = requests.get(url, timeout=settings.QURAN_API_TIMEOUT)
        resp.raise_for_status()
        payload = resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise QuranTextUnavailable(surah_id, str(exc)) from exc
    return (payload.get("data") or {}).get("ayahs") or []


def get_surah_text(surah_id) -> List[AyahText]:
    """
    Arabic text and transliteration of every ayah in a surah.

    Results live in the bounded `quran-text` cache; failed fetches are not cached.
    """
    cache = caches[TEXT_CACHE_ALIAS]
    key = TEXT_CACHE_KEY.format(surah_id=surah_id)
    cached = cache.get(key)
    if cached is not None:
        logger.debug("surah_text_cache_hit", surah_id=surah_id)
        return cached

    arabic = _fetch_edition(surah_id, "quran-uthmani")
    translit = _fetch_edition(surah_id, "en.transliteration")

    merged = [
        AyahText(
            number_in_surah=ayah["numberInSurah"],
            arabic=ayah["text"],
            transliteration=translit[i]["text"] if i < len(translit) else "",
        )
        for i, ayah in enumerate(arabic)
    ]
    cache.set(key, merged)
    logger.info("surah_text_fetched", surah_id=surah_id, ayah_count=len(merged))
    return merged
