from .agenda import ERROR, SUCCESS, AgendaClient
from .api import AgendaApi

__all__ = ["AgendaApi", "AgendaClient", "ERROR", "SUCCESS"]
