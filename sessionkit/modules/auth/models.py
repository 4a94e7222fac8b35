"""
Session request and response data contracts.

A session request is one of two variants, never both:

- ``CredentialSessionRequest``: email and password, creates or fetches a session
- ``SessionIdSessionRequest``: an existing session identifier to re-fetch

The presence of a session identifier is the only thing that decides the
variant. A raw mapping carrying both an identifier and credentials is treated
as an identifier request.
"""

from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import InvalidSessionRequestError

SESSION_ID_KEYS = ("sessionId", "session_id")


class CredentialSessionRequest(BaseModel):
    """Request a session by presenting credentials."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=1, description="Account email address")
    password: str = Field(..., min_length=1, description="Account password", repr=False)

    def to_payload(self) -> Dict[str, str]:
        """Body sent with the credentials POST."""
        return {"email": self.email, "password": self.password}


class SessionIdSessionRequest(BaseModel):
    """Request an existing session by its identifier."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    session_id: str = Field(..., alias="sessionId", min_length=1, description="Session identifier")


SessionRequest = Union[SessionIdSessionRequest, CredentialSessionRequest]


class SessionResponse(BaseModel):
    """Session record returned by the session service."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    session_id: str = Field(..., alias="sessionId", description="Session identifier")
    user_id: str = Field(..., alias="userId", description="Identifier of the session owner")

    @classmethod
    def from_payload(cls, payload: Any) -> "SessionResponse":
        """
        Build a typed response from the payload a retrieval resolved with.

        Retrieval itself never transforms the payload, so callers that want
        attribute access opt in here.
        """
        if isinstance(payload, cls):
            return payload
        return cls.model_validate(payload)


def parse_session_request(data: Union[SessionRequest, Mapping[str, Any]]) -> SessionRequest:
    """
    Normalize a request into one of the two variants.

    Args:
        data: A request model or a mapping such as ``{"sessionId": "123"}``

    Returns:
        SessionIdSessionRequest if a session id is present, otherwise
        CredentialSessionRequest

    Raises:
        InvalidSessionRequestError: If neither variant matches or a present
            field is empty
    """
    if isinstance(data, (SessionIdSessionRequest, CredentialSessionRequest)):
        return data

    if not isinstance(data, Mapping):
        raise InvalidSessionRequestError(())

    try:
        for key in SESSION_ID_KEYS:
            if data.get(key) is not None:
                return SessionIdSessionRequest(session_id=data[key])

        if data.get("email") is not None and data.get("password") is not None:
            return CredentialSessionRequest(email=data["email"], password=data["password"])
    except ValidationError as e:
        # Present but unusable values, e.g. an empty session id
        raise InvalidSessionRequestError(data.keys()) from e

    raise InvalidSessionRequestError(data.keys())
