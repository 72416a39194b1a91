"""Connect request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ConnectRequest(BaseModel):
    """Device metadata posted by the connect page.

    Only ``deviceName`` is recorded. The remaining fields are accepted so the
    page can send whatever it detected.
    """

    device_name: str | None = Field(None, alias="deviceName", description="Display name")
    user_agent: str | None = Field(None, alias="userAgent")
    platform: str | None = None
    language: str | None = None
    screen_resolution: str | None = Field(None, alias="screenResolution")
    timezone: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WifiInfo(BaseModel):
    """Static description of the network the device "joined"."""

    ssid: str
    status: str
    security: str


class ConnectResponse(BaseModel):
    """Confirmation returned after a successful simulated association."""

    success: bool = True
    device_id: str = Field(..., alias="deviceId")
    message: str
    wifi_info: WifiInfo = Field(..., alias="wifiInfo")

    model_config = ConfigDict(populate_by_name=True)
