"""
Report Request DTOs

DTOs for report-related API requests.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class ApproveReportDto(BaseModel):
    """
    Request DTO for a reviewer's approval decision.

    approved must be a real JSON boolean: strings such as "yes" and numbers
    such as 1 are rejected instead of being coerced. An omitted field means
    the report is not approved.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "approved": True
            }
        }
    )

    approved: StrictBool = Field(False, description="Approval decision")
