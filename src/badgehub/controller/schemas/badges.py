"""Badge response schemas and response builders."""

from fastapi import Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from badgehub.badge.badge_data import BadgeData, BadgeFormat
from badgehub.badge.renderer import render_svg
from badgehub.constants import (
    DEFAULT_BADGE_COLOR,
    DEFAULT_LABEL_COLOR,
    ENDPOINT_SCHEMA_VERSION,
    JSON_MEDIA_TYPE,
    SVG_MEDIA_TYPE,
)


class EndpointBadgeResponse(BaseModel):
    """JSON badge in the shields.io endpoint schema.

    Attributes:
        schema_version: Endpoint schema version (always 1)
        label: Left-hand text
        message: Right-hand text
        color: Message background color
        label_color: Label background color
        is_error: Whether the badge reports a failure
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "schemaVersion": 1,
                "label": "installs",
                "message": "12k",
                "color": "brightgreen",
                "labelColor": "grey",
                "isError": False,
            }
        },
    )

    schema_version: int = Field(ENDPOINT_SCHEMA_VERSION, alias="schemaVersion")
    label: str
    message: str
    color: str
    label_color: str = Field(..., alias="labelColor")
    is_error: bool = Field(False, alias="isError")

    @classmethod
    def from_badge(cls, badge: BadgeData) -> "EndpointBadgeResponse":
        return cls(
            label=badge.label or "",
            message=badge.message,
            color=badge.color or DEFAULT_BADGE_COLOR,
            label_color=badge.label_color or DEFAULT_LABEL_COLOR,
            is_error=badge.is_error,
        )


BADGE_RESPONSES = {
    200: {
        "description": "Rendered badge (errors are rendered as badges too)",
        "content": {
            SVG_MEDIA_TYPE: {"schema": {"type": "string"}},
            JSON_MEDIA_TYPE: {
                "schema": EndpointBadgeResponse.model_json_schema(by_alias=True)
            },
        },
    }
}


def badge_response(badge: BadgeData, badge_format: BadgeFormat) -> Response:
    """Serialize a finished badge in the requested format."""
    if badge_format == BadgeFormat.JSON:
        return JSONResponse(
            content=EndpointBadgeResponse.from_badge(badge).model_dump(by_alias=True)
        )

    return Response(content=render_svg(badge), media_type=SVG_MEDIA_TYPE)
