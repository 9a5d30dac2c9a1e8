from .token_dto import TokenPairDTO

__all__ = ["TokenPairDTO"]
