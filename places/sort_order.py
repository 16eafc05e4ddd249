from models.codes import WireCode


class SortOrder(WireCode):
    """How reviews are sorted in a place details response.

    Show the end user which order is in use.
    """
    # Default. Biased towards reviews written in the requested language.
    MOST_RELEVANT = "most_relevant"
    # Chronological. The requested language does not affect the order.
    NEWEST = "newest"

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()
