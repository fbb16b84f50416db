"""Inferred relationships and derived labels between lore nodes.

Every edge here is recomputable from node properties alone. Joins are by
exact, case-sensitive name; "Tatooine (childhood)" does not match
"Tatooine".
"""

from holocron.stores import InferredLink, LabelRule

BORN_ON = InferredLink(
    name="birthworld",
    source_label="Character",
    source_property="homeworld",
    target_label="Location",
    relationship="BORN_ON",
)

MEMBER_OF = InferredLink(
    name="affiliation",
    source_label="Character",
    source_property="affiliation",
    target_label="Faction",
    relationship="MEMBER_OF",
)

FORCE_USER = LabelRule(
    name="force_users",
    label="Character",
    property="forceUser",
    value=True,
    new_label="ForceUser",
)

OCCURRED_IN = InferredLink(
    name="event_eras",
    source_label="TimelineEvent",
    source_property="era",
    target_label="TimelineEra",
    relationship="OCCURRED_IN",
    source_key="title",
)

TOOK_PLACE_AT = InferredLink(
    name="event_locations",
    source_label="TimelineEvent",
    source_property="location",
    target_label="Location",
    relationship="TOOK_PLACE_AT",
    source_key="title",
)

PARTICIPATED_IN = InferredLink(
    name="event_participants",
    source_label="TimelineEvent",
    source_property="participants",
    target_label="Character",
    relationship="PARTICIPATED_IN",
    source_key="title",
    reverse=True,
)

EXPANDED = (("source", "expanded_universe"),)

SERVED_IN = InferredLink(
    name="expanded_service",
    source_label="Character",
    source_property="affiliation",
    target_label="Faction",
    relationship="SERVED_IN",
    source_filter=EXPANDED,
    target_filter=EXPANDED,
)

ALLIANCE_MEMBERSHIP = InferredLink(
    name="alliance_groups",
    source_label="AllianceGroup",
    source_property="members",
    target_label="Faction",
    relationship="MEMBER_OF",
    reverse=True,
)

CHARACTER_RULES = [BORN_ON, MEMBER_OF, FORCE_USER]
EXPANDED_RULES = [SERVED_IN]
FACTION_RULES = [ALLIANCE_MEMBERSHIP]
TIMELINE_RULES = [OCCURRED_IN, TOOK_PLACE_AT, PARTICIPATED_IN]
DEFAULT_RULES = CHARACTER_RULES + EXPANDED_RULES + FACTION_RULES + TIMELINE_RULES
