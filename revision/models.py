from .data.models import AyahRevision, SurahRevision  # noqa: F401
