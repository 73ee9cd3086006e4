"""Form state and payload models for the article configuration form."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_SOURCES = 1
MAX_SOURCES = 5


class ArticleType(str, Enum):
    """Article type enumeration."""

    SEO = "seo"
    STUDENT = "student"
    STANDARD = "standard"
    LIST = "list"


class Tone(str, Enum):
    """Tone of voice enumeration."""

    FORMAL = "formal"
    CASUAL = "casual"
    HUMOROUS = "humorous"
    SERIOUS = "serious"
    OPTIMISTIC = "optimistic"


class ArticleLength(str, Enum):
    """Article length enumeration."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class Language(str, Enum):
    """Output language enumeration (values are the Norwegian display names)."""

    NORWEGIAN = "Norsk"
    SWEDISH = "Svensk"
    DANISH = "Dansk"


class ProjectFolder(BaseModel):
    """A user-owned project folder."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Folder ID")
    name: str = Field(description="Folder name")


class FormState(BaseModel):
    """Immutable field state for one article-creation request."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Article title")
    keywords: str = Field(default="", description="Comma separated keywords")
    description: str = Field(default="", description="What the article is about")
    article_type: ArticleType | None = Field(default=None, description="Article type")
    tone: Tone | None = Field(default=None, description="Tone of voice")
    length: ArticleLength | None = Field(default=None, description="Article length")
    language: Language = Field(default=Language.NORWEGIAN, description="Output language")
    selected_project_id: str | None = Field(
        default=None, description="Selected ProjectFolder.id, None for no project"
    )
    include_images: bool = False
    include_videos: bool = False
    include_sources: bool = False
    enable_web_search: bool = False
    number_of_sources: int = Field(default=MIN_SOURCES, ge=MIN_SOURCES, le=MAX_SOURCES)

    @field_validator("article_type", "tone", "length", "selected_project_id", mode="before")
    @classmethod
    def empty_string_is_unset(cls, value):
        """Treat an empty select value as no selection."""
        if value == "":
            return None
        return value


class ArticlePayload(BaseModel):
    """Submission payload handed to the embedding page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    title: str
    article_type: ArticleType | None = Field(alias="articleType")
    project_id: str | None = Field(alias="projectId")
    keywords: str
    description: str
    tone: Tone | None
    length: ArticleLength | None
    language: Language
    include_images: bool = Field(alias="includeImages")
    include_videos: bool = Field(alias="includeVideos")
    include_sources: bool = Field(alias="includeSources")
    enable_web_search: bool = Field(alias="enableWebSearch")
    number_of_sources: int = Field(alias="numberOfSources")
