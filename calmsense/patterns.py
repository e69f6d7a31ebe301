"""
Pattern Catalog — Static Clinical Tables

Weighted patterns per clinical category, trigger cue tables, cognitive
distortion cues and psychosis indicator tables.

These tables are read-only. They are built once at import and shared by
every call; nothing in the package mutates them. Tuning a weight or a
threshold means editing this file and cutting a new CORE_VERSION.
"""

from __future__ import annotations

import re

from calmsense.scorer import PatternDefinition, pattern
from calmsense.window import bidirectional_patterns

# --- Core Version (stamped on every scan result) ---
CORE_VERSION = "1.0.0"


# ============================================================
# ANXIETY CONTEXT CATEGORIES
# ============================================================

GENERAL_ANXIETY_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"\banxious\b", 3, "Explicit anxiety mention"),
    pattern(r"\banxiety (?:attack|attacks)\b", 4, "Anxiety attack described"),
    pattern(r"\bpanic wave\b", 3, "Describes wave of panic"),
    pattern(r"\bconstant (?:worry|fear)\b", 3, "Constant worry described"),
    pattern(r"\bcan't (?:stop|seem to stop) (?:worrying|thinking)\b", 3, "Cannot stop worrying"),
    pattern(r"\boverwhelmed\b", 2, "Feeling overwhelmed"),
    pattern(r"\bnervous\b", 2, "Feeling nervous"),
    pattern(r"\brestless\b", 2, "Restlessness described"),
    pattern(r"\bstress(?:ed|ing)?\b", 2, "Stress described"),
    pattern(r"\bworried\b", 3, "Worry described"),
)

PANIC_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"\bpanic attacks?\b", 4, "Panic attack mentioned"),
    pattern(r"\bheart (?:is )?(?:racing|pounding)\b", 3, "Heart racing"),
    pattern(r"\bcan'?t breathe\b", 3, "Difficulty breathing"),
    pattern(r"\bchest (?:pain|tight)\b", 2, "Chest pain/tightness"),
    pattern(r"\bfeel like i'm (?:dying|going to die)\b", 3, "Feeling like dying"),
    pattern(r"\blosing control\b", 2, "Losing control sensation"),
    pattern(r"\bdissociating\b", 2, "Dissociation mentioned"),
)

PTSD_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"\bflashbacks?\b", 4, "Flashback described"),
    pattern(r"\bnightmares?\b", 2, "Trauma nightmares"),
    pattern(r"\bptsd\b", 3, "PTSD mentioned"),
    pattern(r"\btrauma\b", 2, "Trauma mentioned"),
    pattern(r"\btrigger(?:ed|ing)?\b", 3, "Triggered response"),
    pattern(r"\bhypervigilant\b", 3, "Hypervigilance mentioned"),
)

OCD_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"\bocd\b", 3, "OCD explicitly mentioned"),
    pattern(r"\b(?:compulsion|compulsive|compulsions)\b", 3, "Compulsion described"),
    pattern(r"\bintrusive thoughts?\b", 3, "Intrusive thoughts described"),
    *bidirectional_patterns(
        r"(?:can't|cannot) stop",
        r"(?:checking|washing|cleaning|counting|rituals?)",
        "Compulsion urge with ritual",
    ),
    *bidirectional_patterns(
        r"(?:urge|need) to",
        r"(?:check|wash|clean|count|repeat)",
        "Compulsive urge linked to behavior",
    ),
    pattern(
        r"(?:ritual|checking|washing|counting|cleaning|repeating).{0,80}"
        r"(?:makes me feel better|reduces anxiety)",
        2,
        "Ritual linked to anxiety relief",
    ),
)

DEPRESSION_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"\bdepress(?:ed|ion)\b", 3, "Depression mentioned"),
    pattern(r"\bhopeless\b", 3, "Hopelessness described"),
    pattern(r"\bworthless\b", 3, "Worthlessness described"),
    pattern(r"\bempty inside\b", 3, "Emptiness described"),
    pattern(r"\bcan't get out of bed\b", 4, "Low motivation described"),
    pattern(r"\bno motivation\b", 3, "No motivation"),
    pattern(r"\bnothing (?:matters|feels good)\b", 3, "Anhedonia described"),
)

CRISIS_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"\bhurt myself\b", 4, "Self-harm intent"),
    pattern(r"\bkill myself\b", 5, "Explicit suicide intent"),
    pattern(r"\bend my life\b", 5, "Intent to end life"),
    pattern(r"\btake my life\b", 5, "Intent to take life"),
    pattern(r"\bsuicidal thoughts?\b", 4, "Suicidal thoughts"),
    pattern(r"\bcan't go on\b", 3, "Expressed inability to continue"),
    pattern(r"\bno reason to live\b", 4, "Loss of will to live"),
)

POSITIVE_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"\bfeeling (?:calm|better|good|okay now)\b", 3, "Positive feeling reported"),
    pattern(r"\bnot anxious anymore\b", 3, "Anxiety relief reported"),
    pattern(r"\bmanaging (?:well|better)\b", 2, "Managing feelings"),
    pattern(r"\bfinding peace\b", 2, "Sense of peace"),
)

# Category key -> (patterns, threshold). Order is the order of the summary.
CONDITION_TABLES: dict[str, tuple[tuple[PatternDefinition, ...], int]] = {
    "general_anxiety": (GENERAL_ANXIETY_PATTERNS, 2),
    "panic": (PANIC_PATTERNS, 4),
    "ptsd": (PTSD_PATTERNS, 4),
    "ocd": (OCD_PATTERNS, 5),
    "depression": (DEPRESSION_PATTERNS, 3),
    "crisis": (CRISIS_PATTERNS, 4),
    "positive": (POSITIVE_PATTERNS, 3),
}


# ============================================================
# TRIGGERS
# ============================================================

def _cues(*regexes: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(r, re.IGNORECASE) for r in regexes)


TRIGGER_PATTERNS: dict[str, tuple[re.Pattern, ...]] = {
    "driving_anxiety": _cues(r"\bdriv(?:ing|e)\b", r"\btraffic\b", r"\bintersection\b", r"\bhighway\b"),
    "work": _cues(r"\bwork\b", r"\bjob\b", r"\bboss\b", r"\boffice\b", r"\bmeeting\b", r"\bdeadline\b"),
    "social": _cues(
        r"\bsocial\b", r"\bcrowd\b", r"\bpublic speaking\b", r"\bparty\b", r"\bbeing around people\b",
    ),
    "health": _cues(
        r"\bdoctor\b", r"\bhospital\b", r"\bmedical\b", r"\bsymptom\b", r"\bdiagnos", r"\bhealth\b",
    ),
    "financial": _cues(
        r"\bmoney\b", r"\bbills?\b", r"\bdebt\b", r"\brent\b", r"\bpaycheck\b", r"\bsavings\b",
    ),
    "relationships": _cues(
        r"\brelationship\b", r"\bpartner\b", r"\bhusband\b", r"\bwife\b", r"\bboyfriend\b",
        r"\bgirlfriend\b", r"\bmarriage\b", r"\bdivorce\b", r"\bbreak ?up\b", r"\bcheat(?:ed|ing)?\b",
    ),
    "performance": _cues(
        r"\btest\b", r"\bexam\b", r"\binterview\b", r"\bgrades?\b", r"\baudition\b",
        r"\bperformance review\b",
    ),
    "future_uncertainty": _cues(
        r"\bfuture\b", r"\buncertain\b", r"\bdon't know what to do\b", r"\bno idea what comes next\b",
        r"\bplan\b", r"\bdecision\b",
    ),
}

TRIGGER_TAGS: tuple[str, ...] = tuple(TRIGGER_PATTERNS)


# ============================================================
# COGNITIVE DISTORTIONS
# ============================================================

# Label -> cue. Order is the reporting order.
DISTORTION_PATTERNS: dict[str, re.Pattern] = {
    "All-or-nothing thinking": re.compile(r"(?:always|never|everyone|nobody)\b"),
    "Should statements": re.compile(r"should\b|must\b|have to\b"),
    "Catastrophizing": re.compile(r"worst case|disaster|catastroph|awful|terrible|ruined"),
}

DISTORTION_LABELS: tuple[str, ...] = tuple(DISTORTION_PATTERNS)


# ============================================================
# PSYCHOSIS INDICATORS
# ============================================================

# Tested against the raw message, not the normalized form.
PSYCHOSIS_DIRECT_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"\bhallucinat(?:e|ing|ion|ions)\b", 3, "Hallucination mentioned"),
    pattern(r"\bpsychosis\b", 3, "Psychosis mentioned"),
    pattern(r"\bpsychotic\b", 3, "Psychotic episode mentioned"),
    pattern(r"\bdelusions?\b", 3, "Delusion mentioned"),
    pattern(r"\bparanoi[ad]\b", 3, "Paranoia mentioned"),
    pattern(r"\bschizophren(?:ia|ic)\b", 3, "Schizophrenia mentioned"),
)

PSYCHOSIS_CONTEXT_PATTERNS: tuple[PatternDefinition, ...] = (
    pattern(r"hearing\s+(?:voices?|things|whispers|someone)\b", 2, "Hearing voices or sounds"),
    pattern(
        r"voices?\s+(?:in\s+my\s+head|talking\s+to\s+me|telling\s+me)\b",
        2,
        "Voices addressing the speaker",
    ),
    pattern(
        r"seeing\s+(?:things?|people|shadows|figures|creatures)\s+(?:that\s+)?"
        r"(?:aren't|are not|isn't|is not|nobody else is|no one else is|others aren't)\s+(?:seeing|there)",
        2,
        "Seeing things that are not there",
    ),
    pattern(
        r"seeing\s+(?:things?|people|shadows|figures|creatures)\s+"
        r"(?:no\s+one\s+else|nobody\s+else|others)\s+(?:can|does)",
        2,
        "Seeing things no one else sees",
    ),
    pattern(
        r"(?:someone|people|they|he|she)\s+(?:following|chasing|watching|stalking|hunting)\s+(?:me|us)",
        2,
        "Being followed or watched",
    ),
    pattern(
        r"feel\s+like\s+(?:someone|they|people)\s+(?:are\s+)?(?:watching|following|after)\s+(?:me|us)",
        2,
        "Feeling watched or pursued",
    ),
    pattern(
        r"objects?\s+(?:moving|shifting|breathing|melting)\s+on\s+their\s+own",
        2,
        "Objects moving on their own",
    ),
    pattern(r"things\s+(?:that\s+)?(?:aren't|are not|isn't|is not)\s+real\b", 2, "Things that are not real"),
    pattern(r"(?:shadows|figures)\s+that\s+(?:aren't|are not)\s+there", 2, "Shadows or figures not there"),
    pattern(r"(?:people|voices)\s+others\s+can't\s+hear", 2, "Voices others cannot hear"),
)

# Raw-text gate: the message must mention an agency before the window check runs.
AGENCY_MENTION = re.compile(
    r"\b(?:cia|fbi|nsa|mi6|mossad|agents?|spies|intelligence agency)\b", re.IGNORECASE,
)
AGENCY_TOKEN = re.compile(r"cia|fbi|nsa|mi6|mossad|agent|agents|spy|spies|intelligence|agency")

SURVEILLANCE_PHRASES: tuple[str, ...] = (
    "following me",
    "following us",
    "after me",
    "after us",
    "watching me",
    "watching us",
    "tracking me",
    "tracking us",
    "spying on me",
    "spying on us",
    "bugging me",
    "bugging us",
)

AGENCY_SURVEILLANCE_WEIGHT = 3
AGENCY_SURVEILLANCE_LABEL = "agency+surveillance"
PSYCHOSIS_THRESHOLD = 3
