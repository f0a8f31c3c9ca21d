"""
Client Error Reporting Endpoint.

The web frontend posts uncaught errors here so they show up in the server
logs next to the API traffic.
"""

from fastapi import APIRouter

from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.io.errors import ClientErrorAck, ClientErrorReport

logger = get_logger("skillbridge.client_errors")

router = APIRouter(tags=["errors"])

STACK_PREVIEW_CHARS = 200


def _preview(text, missing: str) -> str:
    if not text:
        return missing
    if len(text) <= STACK_PREVIEW_CHARS:
        return text
    return text[:STACK_PREVIEW_CHARS] + "..."


@router.post(
    "",
    response_model=ClientErrorAck,
    summary="Report Client Error",
    description="Record an error raised in the browser. No authentication required.",
)
async def log_client_error(report: ClientErrorReport) -> ClientErrorAck:
    stack = _preview(report.stack, "No stack trace")
    component_stack = _preview(report.component_stack, "No component stack")
    logger.error(
        f"Frontend error at {report.url}: {report.name}: {report.message}\n"
        f"  stack: {stack}\n"
        f"  component stack: {component_stack}",
        extra={
            "client_timestamp": report.timestamp,
            "error_name": report.name,
            "url": report.url,
            "user_agent": report.user_agent,
            "stack": stack,
            "component_stack": component_stack,
        },
    )
    return ClientErrorAck(success=True, message="Error logged successfully")
