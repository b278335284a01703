"""Decode a JWT without verifying it."""

from __future__ import annotations

import json

import structlog
from pydantic import BaseModel, ValidationError
from structlog.stdlib import BoundLogger

from .constants import LOGGER_NAME, SEGMENT_COUNT, SEGMENT_SEPARATOR
from .exceptions import (
    IncorrectSegmentCountError,
    InvalidBase64UrlError,
    InvalidTokenError,
    JWTError,
)
from .models.claims import RegisteredClaims
from .models.token import JWTComponents, JWTHeader, JWTToken
from .util import base64url_decode

__all__ = [
    "TokenDecoder",
    "decode_segment",
    "decode_token",
    "split_token",
]


def split_token(token: str) -> tuple[str, str, str]:
    """Split a JWT in compact serialization into its segments.

    Parameters
    ----------
    token
        The encoded token.

    Returns
    -------
    tuple of str
        The header, payload, and signature segments, still encoded. Empty
        segments are returned as-is.

    Raises
    ------
    IncorrectSegmentCountError
        Raised if the token does not have exactly three segments.
    """
    segments = token.split(SEGMENT_SEPARATOR)
    if len(segments) != SEGMENT_COUNT:
        raise IncorrectSegmentCountError(len(segments))
    header, payload, signature = segments
    return header, payload, signature


def decode_segment[M: BaseModel](
    model: type[M], segment: str, *, part: str | None = None
) -> M:
    """Decode one base64url-encoded JSON segment of a JWT into a model.

    Parameters
    ----------
    model
        Model the JSON should be parsed into.
    segment
        Encoded segment.
    part
        Name of the token part, used in error messages.

    Returns
    -------
    pydantic.BaseModel
        The parsed model.

    Raises
    ------
    InvalidBase64UrlError
        Raised if the segment is not valid base64url.
    InvalidTokenError
        Raised if the decoded segment is not JSON or does not match the
        model. The specific problem is only available as the cause.
    """
    try:
        data = base64url_decode(segment)
    except InvalidBase64UrlError as e:
        raise InvalidBase64UrlError(segment, part) from e
    try:
        return model.model_validate(json.loads(data))
    except (ValidationError, ValueError, RecursionError) as e:
        raise InvalidTokenError(part) from e


class TokenDecoder[P: RegisteredClaims]:
    """Decodes JWTs into header, typed payload, and signature.

    The signature is never checked. Callers that need to trust the contents
    of a token must verify it separately.

    Parameters
    ----------
    payload_model
        Model for the token payload.
    logger
        Logger to use to report status information. Defaults to the
        jwthandler logger.
    """

    def __init__(
        self,
        payload_model: type[P],
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        self._payload_model = payload_model
        self._logger = logger or structlog.get_logger(LOGGER_NAME)

    @property
    def payload_model(self) -> type[P]:
        """Model used for token payloads."""
        return self._payload_model

    def get_components(self, token: str) -> JWTComponents[P]:
        """Decode the parts of a token.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        JWTComponents
            Decoded header and payload and the raw signature.

        Raises
        ------
        IncorrectSegmentCountError
            Raised if the token does not have exactly three segments.
        InvalidBase64UrlError
            Raised if the header or payload is not valid base64url. The
            ``part`` attribute says which.
        InvalidTokenError
            Raised if the header or payload is not valid JSON for its model.
            The ``part`` attribute says which.
        """
        header_segment, payload_segment, signature = split_token(token)
        header = decode_segment(JWTHeader, header_segment, part="header")
        payload = decode_segment(
            self._payload_model, payload_segment, part="body"
        )
        return JWTComponents(header, payload, signature)

    def decode(self, token: str) -> JWTToken[P]:
        """Decode a token.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        JWTToken
            The decoded token, with claims derived from the payload.

        Raises
        ------
        JWTError
            Raised if the token cannot be decoded. See `get_components` for
            the specific exceptions.
        """
        try:
            header, payload, signature = self.get_components(token)
        except JWTError as e:
            self._logger.debug(
                "Unable to decode token", error=e.error, detail=str(e)
            )
            raise
        result = JWTToken(header, payload, signature, token)
        self._logger.debug(
            "Decoded token",
            alg=header.alg,
            kid=header.kid,
            claims=[c.key.value for c in result.claims if c.key],
        )
        return result


def decode_token(
    token: str,
    payload_model: type[RegisteredClaims] = RegisteredClaims,
) -> JWTToken[RegisteredClaims]:
    """Decode a token without constructing a decoder.

    Parameters
    ----------
    token
        The encoded token.
    payload_model
        Model for the token payload.

    Returns
    -------
    JWTToken
        The decoded token.

    Raises
    ------
    JWTError
        Raised if the token cannot be decoded.
    """
    return TokenDecoder(payload_model).decode(token)
