"""Enumerated style names used to build element style paths."""

from __future__ import annotations

from enum import Enum


class SName(Enum):
    """Well-known style names.

    A member contributes its lower-cased name without underscores as a
    token, e.g. ``SName.ACTIVITY_DIAGRAM`` -> ``activitydiagram``.
    """

    ROOT = "root"
    ELEMENT = "element"
    DOCUMENT = "document"
    TITLE = "title"
    HEADER = "header"
    FOOTER = "footer"
    LEGEND = "legend"
    CAPTION = "caption"
    CLICKABLE = "clickable"
    STEREOTYPE = "stereotype"
    ACTIVITY_DIAGRAM = "activityDiagram"
    CLASS_DIAGRAM = "classDiagram"
    COMPONENT_DIAGRAM = "componentDiagram"
    SEQUENCE_DIAGRAM = "sequenceDiagram"
    STATE_DIAGRAM = "stateDiagram"
    USECASE_DIAGRAM = "usecaseDiagram"
    ACTIVITY = "activity"
    ARROW = "arrow"
    DIAMOND = "diamond"
    NOTE = "note"
    PARTITION = "partition"
    SWIMLANE = "swimlane"
    GROUP = "group"
    PACKAGE = "package"
    RECTANGLE = "rectangle"
    CLASS = "class"
    COMPONENT = "component"
    PARTICIPANT = "participant"
    LIFE_LINE = "lifeLine"
    STATE = "state"
    USECASE = "usecase"
    ACTOR = "actor"
    START = "start"
    STOP = "stop"
    END = "end"
