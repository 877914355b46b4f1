from agent.city_extractor import CityExtractor
from agent.query_orchestrator import QueryOrchestrator
from agent.response_synthesizer import ResponseSynthesizer

__all__ = ["CityExtractor", "QueryOrchestrator", "ResponseSynthesizer"]
