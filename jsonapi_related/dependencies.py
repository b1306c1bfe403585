"""FastAPI dependency decoding JSON:API request bodies into entities."""

from json import JSONDecodeError
from typing import Any, Generic

from fastapi import Request

from jsonapi_related.config import DecoderSettings
from jsonapi_related.core.errors import DocumentDecodeError, type_mismatch
from jsonapi_related.decoding.document import decode_document_or_raise
from jsonapi_related.decoding.entity import EntityT


class JSONAPIBody(Generic[EntityT]):
    """Decode the request document's primary data into ``entity_cls``.

    Use as ``store: Store = Depends(JSONAPIBody(Store))``. Decode failures
    raise ``DocumentDecodeError``; pair with ``install_error_handlers`` to
    answer them with a 422 error document.
    """

    def __init__(
        self,
        entity_cls: type[EntityT],
        *,
        many: bool = False,
        settings: DecoderSettings | None = None,
    ) -> None:
        self.entity_cls = entity_cls
        self.many = many
        self.settings = settings

    async def __call__(self, request: Request) -> Any:
        try:
            document = await request.json()
        except (JSONDecodeError, UnicodeDecodeError) as exc:
            raise DocumentDecodeError(
                [type_mismatch(detail=f"Request body is not valid JSON: {exc}")]
            ) from exc
        decoded = decode_document_or_raise(self.entity_cls, document, settings=self.settings)
        if self.many and not isinstance(decoded, tuple):
            raise DocumentDecodeError(
                [type_mismatch("data", detail="Expected an array of resource objects")]
            )
        if not self.many and (decoded is None or isinstance(decoded, tuple)):
            raise DocumentDecodeError(
                [type_mismatch("data", detail="Expected a single resource object")]
            )
        return decoded
