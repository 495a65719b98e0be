"""
Sandbox domain models.

Connection descriptor for a running database sandbox as reported by
the sandbox registry API.

Dependencies: pydantic
System role: Sandbox registry contracts
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator


class SandboxDescriptor(BaseModel):
    """One live database sandbox leased to a learner session."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    sandbox_id: str | None = Field(None, alias="sandboxId")
    sandbox_hash_key: str | None = Field(None, alias="sandboxHashKey")
    usecase: str = Field(..., description="Use case the sandbox was provisioned for")
    scheme: str = Field(default="bolt", description="Driver URI scheme (bolt, neo4j, neo4j+s)")
    host: str | None = Field(None, description="Sandbox host name")
    ip: str | None = Field(None, description="Sandbox IP address")
    port: int = Field(..., alias="boltPort", description="Bolt protocol port")
    username: str
    password: SecretStr

    @model_validator(mode="after")
    def _require_address(self) -> "SandboxDescriptor":
        if not (self.host or self.ip):
            raise ValueError("sandbox must report a host or an ip")
        return self

    @property
    def address(self) -> str:
        """Host name when known, otherwise the IP address."""
        return self.host or self.ip or ""

    @property
    def uri(self) -> str:
        """Driver connection URI, e.g. ``bolt://10.0.0.1:7687``."""
        return f"{self.scheme}://{self.address}:{self.port}"
