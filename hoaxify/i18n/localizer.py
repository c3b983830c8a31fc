"""
Localizer - Resolves message codes to display text per locale.

Resource tables are JSON files named after their locale
(locales/en.json, locales/th.json, ...) and are loaded once when the
Localizer is built. Lookups fall back to the default locale, then to the
code itself.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"


class Localizer:
    """
    Implements MessageLocalizer protocol from JSON resource tables.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Immutable after construction, safe to share between requests.
    """

    def __init__(
        self,
        tables: dict[str, dict[str, str]],
        default_locale: str = "en",
    ) -> None:
        if default_locale not in tables:
            raise ValueError(f"No resource table for default locale: {default_locale}")
        self._tables = tables
        self.default_locale = default_locale

    @classmethod
    def from_directory(cls, directory: Path = LOCALES_DIR, default_locale: str = "en") -> "Localizer":
        """Load every <locale>.json file in `directory`."""
        tables = {}
        for path in sorted(directory.glob("*.json")):
            tables[path.stem.lower()] = json.loads(path.read_text(encoding="utf-8"))
        logger.info("Loaded %d locale table(s): %s", len(tables), ", ".join(tables))
        return cls(tables, default_locale=default_locale)

    @property
    def locales(self) -> frozenset[str]:
        return frozenset(self._tables)

    def translate(self, code: str, locale: str | None = None) -> str:
        """
        Resolve a message code for `locale`.

        Unknown locales and codes missing from the requested table resolve
        through the default locale; a code missing everywhere is returned as is.
        """
        table = self._tables.get((locale or "").lower(), {})
        if code in table:
            return table[code]
        return self._tables[self.default_locale].get(code, code)

    def negotiate(self, accept_language: str | None) -> str:
        """
        Pick a supported locale from an Accept-Language header value.

        Honors quality weights (``th;q=0.9``) and matches on the primary
        subtag, so ``th-TH`` selects ``th``. Falls back to the default locale.
        """
        if not accept_language:
            return self.default_locale

        candidates: list[tuple[float, int, str]] = []
        for position, part in enumerate(accept_language.split(",")):
            tag, _, params = part.strip().partition(";")
            tag = tag.strip().lower()
            if not tag or tag == "*":
                continue
            quality = 1.0
            params = params.strip()
            if params.startswith("q="):
                try:
                    quality = float(params[2:])
                except ValueError:
                    continue
            if quality <= 0:
                continue
            # Stable ordering: higher quality first, then header position
            candidates.append((-quality, position, tag))

        for _, _, tag in sorted(candidates):
            if tag in self._tables:
                return tag
            primary = tag.split("-", 1)[0]
            if primary in self._tables:
                return primary
        return self.default_locale
