"""Moderation types. Category names keep the API's slash/dash spelling as aliases."""

from pydantic import Field

from portkey_client.models.common import PortkeyModel


class ModerationRequest(PortkeyModel):
    input: str | list[str]
    model: str | None = "text-moderation-latest"


class ModerationCategories(PortkeyModel):
    hate: bool = False
    hate_threatening: bool = Field(False, alias="hate/threatening")
    harassment: bool = False
    harassment_threatening: bool = Field(False, alias="harassment/threatening")
    self_harm: bool = Field(False, alias="self-harm")
    self_harm_intent: bool = Field(False, alias="self-harm/intent")
    self_harm_instructions: bool = Field(False, alias="self-harm/instructions")
    sexual: bool = False
    sexual_minors: bool = Field(False, alias="sexual/minors")
    violence: bool = False
    violence_graphic: bool = Field(False, alias="violence/graphic")


class ModerationCategoryScores(PortkeyModel):
    hate: float = 0.0
    hate_threatening: float = Field(0.0, alias="hate/threatening")
    harassment: float = 0.0
    harassment_threatening: float = Field(0.0, alias="harassment/threatening")
    self_harm: float = Field(0.0, alias="self-harm")
    self_harm_intent: float = Field(0.0, alias="self-harm/intent")
    self_harm_instructions: float = Field(0.0, alias="self-harm/instructions")
    sexual: float = 0.0
    sexual_minors: float = Field(0.0, alias="sexual/minors")
    violence: float = 0.0
    violence_graphic: float = Field(0.0, alias="violence/graphic")


class ModerationResult(PortkeyModel):
    flagged: bool
    categories: ModerationCategories
    category_scores: ModerationCategoryScores


class ModerationResponse(PortkeyModel):
    id: str
    model: str
    results: list[ModerationResult]
