"""Search executor: full scan of the store through the predicate engine"""

import logging
from collections.abc import Iterable

from docstore.core.predicates import matches
from docstore.models import Document, SearchRequest


logger = logging.getLogger(__name__)


def search_documents(docs: Iterable[Document], request: SearchRequest | None) -> list[Document]:
    """Return the docs matching request, in no particular order. None matches everything."""
    request = request or SearchRequest()
    scanned = 0
    results = []
    for doc in docs:
        scanned += 1
        if matches(doc, request):
            results.append(doc)
    logger.debug("Search scanned %d document(s), matched %d", scanned, len(results))
    return results
