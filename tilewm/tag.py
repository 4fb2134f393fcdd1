"""Tags: the virtual desktops that workspaces display."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

HIDDEN_TAG_MAX_ID = (1 << 64) - 1
"""The id of the first hidden tag; later hidden tags count down from it."""


@dataclass
class Tag:
    """A desktop that a workspace can show.

    Tags are identified by ``id``; the label is only for display. Hidden tags
    are internal and never shown on a workspace.
    """

    id: int = 0
    label: str = ""
    hidden: bool = False


@dataclass
class Tags:
    """All known tags, numbered and ordered automatically.

    Normal tags get ids 1, 2, 3, ... in order, without gaps. Hidden tags get
    ids counting down from ``HIDDEN_TAG_MAX_ID`` so they never clash with
    normal ones, and their labels are unique.
    """

    _normal: list[Tag] = field(default_factory=list)
    _hidden: list[Tag] = field(default_factory=list)

    def add_new(self, label: str) -> int:
        """Append a normal tag with ``label`` and return its id."""
        tag = Tag(id=len(self._normal) + 1, label=label)
        self._normal.append(tag)
        return tag.id

    def add_new_unlabeled(self) -> int:
        """Append a normal tag labelled with its own id and return the id."""
        return self.add_new(str(len(self._normal) + 1))

    def add_new_hidden(self, label: str) -> int | None:
        """Append a hidden tag and return its id.

        Returns None, creating nothing, if a hidden tag with that label exists.
        """
        if self.get_hidden_by_label(label) is not None:
            log.error(
                "Tried creating a hidden tag with label %s, "
                "but a hidden tag with the same label already exists",
                label,
            )
            return None
        tag = Tag(id=HIDDEN_TAG_MAX_ID - len(self._hidden), label=label, hidden=True)
        self._hidden.append(tag)
        return tag.id

    def normal(self) -> list[Tag]:
        """The normal tags, in id order."""
        return self._normal

    def all(self) -> list[Tag]:
        """All tags; the hidden ones come last."""
        return [*self._normal, *self._hidden]

    def get(self, tag_id: int) -> Tag | None:
        """The tag with ``tag_id``, normal or hidden, or None."""
        if 1 <= tag_id <= len(self._normal):
            return self._normal[tag_id - 1]
        return next((tag for tag in self._hidden if tag.id == tag_id), None)

    def get_hidden_by_label(self, label: str) -> Tag | None:
        return next((tag for tag in self._hidden if tag.label == label), None)

    def len_normal(self) -> int:
        return len(self._normal)