class RevisionError(Exception):
    pass


class StoreUnavailable(RevisionError):
    """The schedule store could not be read or written."""


class SurahNotScheduled(RevisionError):
    def __init__(self, surah_id):
        super().__init__(f"Surah {surah_id} is not on the revision schedule")
        self.surah_id = surah_id


class QuranTextUnavailable(RevisionError):
    def __init__(self, surah_id, reason=""):
        message = f"Could not fetch text for surah {surah_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.surah_id = surah_id
