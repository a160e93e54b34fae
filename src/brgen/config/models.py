"""
Configuration models for brgen.

Defines all configuration structures using Pydantic for validation.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Generation Configuration
# ============================================================================


class GenerationConfig(BaseModel):
    """Settings that shape the emitted BR source."""

    model_config = ConfigDict(frozen=True)

    package_name: str = Field(min_length=1, description="Java package of the generated BR class")
    use_final: bool = Field(default=True, description="Declare constants as 'static final'")


# ============================================================================
# Output Configuration
# ============================================================================


class OutputConfig(BaseModel):
    """Where generated sources are written."""

    output_dir: Path = Field(
        default=Path("./generated"), description="Root directory for generated sources"
    )


# ============================================================================
# Main Configuration
# ============================================================================


class BRGenConfig(BaseModel):
    """Root configuration model for brgen."""

    generation: GenerationConfig
    output: OutputConfig = Field(default_factory=OutputConfig)
    properties: list[str] = Field(
        default_factory=list, description="Bindable property names listed inline"
    )
    properties_file: Path | None = Field(
        default=None, description="Text file with one property name per line"
    )
