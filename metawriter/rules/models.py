from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FormattingRules(BaseModel):
    use_new_line_between_entries: bool = True
    newline_policy: Literal["live", "snapshot"] = "live"
    omit_empty_values: bool = False

    model_config = ConfigDict(extra="forbid")

class TagDefaults(BaseModel):
    # null in YAML starts the field absent
    charset: str | None = "UTF-8"
    viewport: str | None = "width=device-width, initial-scale=1.0"
    og_type: str | None = "website"
    twitter_card: str | None = "summary_large_image"

    model_config = ConfigDict(extra="forbid")

class Rules(BaseModel):
    formatting: FormattingRules = Field(default_factory=FormattingRules)
    defaults: TagDefaults = Field(default_factory=TagDefaults)
