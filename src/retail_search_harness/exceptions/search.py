"""
Search flow exceptions.
"""

from retail_search_harness.exceptions.base import HarnessError


class SearchFlowError(HarnessError):
    """Base exception for search flow failures."""
    pass


class SearchError(SearchFlowError):
    """
    The search did not reach a results page or no title matched.
    """
    
    def __init__(self, message: str, term: str | None = None, url: str | None = None):
        super().__init__(message, {"term": term, "url": url})
        self.term = term
        self.url = url


class NoResultsError(SearchFlowError):
    """The site explicitly reported that the search returned nothing."""
    
    def __init__(self, message: str, notice: str):
        super().__init__(message, {"notice": notice})
        self.notice = notice


class PriceFormatError(SearchFlowError):
    """
    A price string could not be parsed.
    
    Raised when the text is empty, lacks the expected currency symbol,
    or does not hold a positive amount.
    """
    
    def __init__(self, message: str, text: str | None = None):
        super().__init__(message, {"text": text})
        self.text = text
