"""
➡️ But : Définir les erreurs renvoyées au client HTTP.

ApiError porte un message court + un code HTTP.

api_error_handler() (branché dans app.main) la transforme en réponse texte brut :
pas de corps JSON structuré, pas de code d'erreur, juste le message.

🔹 Avantages :

Les couches basses lèvent une exception, une seule fonction décide du format de sortie.
"""

from fastapi import Request, status
from fastapi.responses import PlainTextResponse


class ApiError(Exception):
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodeError(ApiError):
    """Corps de requête refusé par le décodeur (content-type, JSON, champs)."""


async def api_error_handler(request: Request, exc: ApiError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)
