"""Chart-facing response models.

Each view keeps the (key, count) meaning of `KeyCount` but uses the field
names its chart binds to.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import DashboardViews


class PortCount(BaseModel):
    port: str = Field(description="Destination port.")
    count: int = Field(ge=1, description="Alerts seen for this port.")


class SourceIpCount(BaseModel):
    ip: str = Field(description="Source address.")
    count: int = Field(ge=1, description="Alerts seen from this address.")


class TimeCount(BaseModel):
    time: str = Field(description="Hour bucket (YYYY-MM-DDTHH).")
    count: int = Field(ge=1, description="Alerts seen in this hour.")


class SignatureShare(BaseModel):
    name: str = Field(description="Alert signature, or 'Unknown'.")
    value: int = Field(ge=1, description="Alerts matching this signature.")


class DashboardResponse(BaseModel):
    alert_count: int = Field(ge=0, description="Number of alert events loaded.")
    ports: list[PortCount] = Field(default_factory=list)
    top_source_ips: list[SourceIpCount] = Field(default_factory=list)
    timeline: list[TimeCount] = Field(default_factory=list)
    top_signatures: list[SignatureShare] = Field(default_factory=list)

    @classmethod
    def from_views(cls, views: DashboardViews) -> DashboardResponse:
        return cls(
            alert_count=views.alert_count,
            ports=[PortCount(port=r.key, count=r.count) for r in views.ports],
            top_source_ips=[SourceIpCount(ip=r.key, count=r.count) for r in views.top_source_ips],
            timeline=[TimeCount(time=r.key, count=r.count) for r in views.timeline],
            top_signatures=[SignatureShare(name=r.key, value=r.count) for r in views.top_signatures],
        )
