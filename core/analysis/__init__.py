from core.analysis.interfaces import AnalysisProvider, AnalysisProviderError
from core.analysis.keyword_provider import KeywordAnalysisProvider

__all__ = [
    'AnalysisProvider',
    'AnalysisProviderError',
    'KeywordAnalysisProvider',
]
