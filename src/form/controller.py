"""Controller owning the article configuration form."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

from src.form import transitions
from src.form.models import (
    ArticleLength,
    ArticlePayload,
    ArticleType,
    FormState,
    Language,
    ProjectFolder,
    Tone,
)

logger = logging.getLogger(__name__)


class FolderSource(Protocol):
    """Anything that can list a user's project folders."""

    def fetch(self, user_identity: str) -> list[ProjectFolder]: ...


class SubmitNotAllowedError(ValueError):
    """Raised when submitting an article the word quota cannot cover."""


class ArticleFormController:
    """Holds the form state for one article-creation request.

    Field handlers replace ``state`` with the result of a pure transition.
    Folder options are loaded on construction and whenever the user identity
    changes. Each load is tagged with a generation token and a result is only
    applied while its token is the latest one, so a slow response for a
    previous identity never overwrites a newer list.
    """

    def __init__(
        self,
        on_submit: Callable[[ArticlePayload], Any],
        words_remaining: int,
        total_words: int,
        user_identity: str,
        folder_lookup: FolderSource | None = None,
    ):
        """Initialize the controller and load the user's folders.

        Args:
            on_submit: Callback receiving the payload on submit.
            words_remaining: Words left in the user's quota.
            total_words: Total words in the user's quota.
            user_identity: Email address owning the project folders.
            folder_lookup: Folder source. Defaults to ProjectFolderLookup.
        """
        if folder_lookup is None:
            from src.folders.lookup import ProjectFolderLookup

            folder_lookup = ProjectFolderLookup()

        self.on_submit = on_submit
        self.words_remaining = words_remaining
        self.total_words = total_words
        self.user_identity = user_identity
        self.folder_lookup = folder_lookup

        self.state = FormState()
        self.folders: list[ProjectFolder] = []
        self._folder_generation = 0

        self.refresh_folders()

    # Folder options

    def set_user_identity(self, user_identity: str) -> None:
        """Switch user; reloads folders only if the identity changed."""
        if user_identity == self.user_identity:
            return
        self.user_identity = user_identity
        self.refresh_folders()

    def _begin_folder_fetch(self) -> int:
        self._folder_generation += 1
        return self._folder_generation

    def _apply_folders(self, token: int, folders: list[ProjectFolder]) -> bool:
        if token != self._folder_generation:
            logger.debug(f"Discarding stale folder list (token {token})")
            return False
        self.folders = list(folders)

        # A selection from the previous list may not exist any more
        selected = self.state.selected_project_id
        if selected is not None and selected not in {str(f.id) for f in self.folders}:
            self._update(selected_project_id=None)
        return True

    def refresh_folders(self) -> bool:
        """Load folders for the current identity.

        Returns:
            True if the result replaced the folder list.
        """
        token = self._begin_folder_fetch()
        folders = self.folder_lookup.fetch(self.user_identity)
        return self._apply_folders(token, folders)

    async def arefresh_folders(self) -> bool:
        """Async version of refresh_folders.

        Runs the blocking lookup in a worker thread. Overlapping calls are
        allowed; only the most recently started one is applied.
        """
        token = self._begin_folder_fetch()
        folders = await asyncio.to_thread(self.folder_lookup.fetch, self.user_identity)
        return self._apply_folders(token, folders)

    # Field handlers

    def _update(self, **changes: Any) -> None:
        self.state = transitions.apply_change(self.state, **changes)

    def set_title(self, title: str) -> None:
        self._update(title=title)

    def set_keywords(self, keywords: str) -> None:
        self._update(keywords=keywords)

    def set_description(self, description: str) -> None:
        self._update(description=description)

    def set_article_type(self, article_type: ArticleType | str | None) -> None:
        self._update(article_type=article_type)

    def set_tone(self, tone: Tone | str | None) -> None:
        self._update(tone=tone)

    def set_length(self, length: ArticleLength | str | None) -> None:
        self._update(length=length)

    def set_language(self, language: Language | str) -> None:
        self._update(language=language)

    def set_project(self, project_id: str | int | None) -> None:
        self._update(selected_project_id=None if project_id is None else str(project_id))

    def set_include_images(self, checked: bool) -> None:
        self._update(include_images=checked)

    def set_include_videos(self, checked: bool) -> None:
        self._update(include_videos=checked)

    def set_include_sources(self, checked: bool) -> None:
        self.state = transitions.set_include_sources(self.state, checked)

    def set_enable_web_search(self, enabled: bool) -> None:
        self.state = transitions.set_enable_web_search(self.state, enabled)

    def set_number_of_sources(self, raw: Any) -> None:
        self.state = transitions.set_number_of_sources(self.state, raw)

    # Derived state

    @property
    def estimated_word_count(self) -> int:
        return transitions.estimated_word_count(self.state.length)

    @property
    def can_submit(self) -> bool:
        """Advisory gate for the submit button."""
        return transitions.can_submit(self.state.length, self.words_remaining)

    @property
    def web_search_locked(self) -> bool:
        return transitions.web_search_locked(self.state)

    @property
    def missing_required_fields(self) -> list[str]:
        return transitions.missing_required_fields(self.state)

    # Submission

    def submit(self) -> ArticlePayload:
        """Hand the current state to the on_submit callback.

        State is left as-is afterwards; resetting is up to the caller.

        Returns:
            The payload passed to on_submit.

        Raises:
            SubmitNotAllowedError: If the word quota does not cover the
                selected length.
        """
        if not self.can_submit:
            raise SubmitNotAllowedError(
                f"Estimated {self.estimated_word_count} words exceeds "
                f"{self.words_remaining} remaining"
            )

        payload = transitions.build_payload(self.state)
        self.on_submit(payload)
        return payload
