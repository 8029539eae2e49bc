"""Record search used by the search page and the search API.

Records arrive grouped by category (``{"birth": [...], "death": [...], ...}``)
and are filtered by record type, review status and a free-text term. The
functions here only read the records they are given.
"""

ALL = "all"
CATEGORIES = ("birth", "death", "marriage", "divorce")
STATUSES = ("Pending", "Approved", "Rejected")
DEFAULT_STATUS = "Pending"


class SearchQuery:
    def __init__(self, search_term="", record_type=ALL, status=ALL):
        self.search_term = search_term or ""
        self.record_type = record_type
        self.status = status

    @classmethod
    def from_args(cls, args):
        """Build a query from request arguments (``q``, ``type``, ``status``).

        Unknown record types and statuses fall back to ``all``.
        """
        record_type = args.get("type", ALL)
        if record_type not in CATEGORIES:
            record_type = ALL
        status = args.get("status", ALL)
        if status not in STATUSES:
            status = ALL
        return cls(args.get("q", ""), record_type, status)

    def includes(self, category):
        return self.record_type == ALL or self.record_type == category

    def __repr__(self):
        return (f"SearchQuery(search_term={self.search_term!r}, "
                f"record_type={self.record_type!r}, status={self.status!r})")


def effective_status(record):
    """A record's status, or Pending when it has none."""
    return getattr(record, "status", None) or DEFAULT_STATUS


def matches_status(record, status):
    return status == ALL or effective_status(record) == status


def matches_text(record, search_term):
    if not search_term or not search_term.strip():
        return True
    extract = getattr(record, "searchable_values", None)
    if extract is None:
        return False
    needle = search_term.lower()
    return any(needle in value.lower() for value in extract() if isinstance(value, str))


def filter_category(category, records, query):
    if not query.includes(category):
        return []
    return [
        record for record in records
        if matches_status(record, query.status)
        and matches_text(record, query.search_term)
    ]


def filter_records(records, query):
    """Filter records grouped by category.

    Every category appears in the result. Categories excluded by the
    query's record type map to an empty list; the others keep the records
    that pass both the status and the text check, in their original order.
    """
    return {
        category: filter_category(category, records.get(category, []), query)
        for category in CATEGORIES
    }
