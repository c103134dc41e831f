# lib/questions.py
"""
Doomscrolling Assessment Questions

24 items (3 per construct) selected from the DS1-DS8 blocks of the research
scale. Each question carries two independent keys: the research construct it
measures and the user-facing dimension it is reported under.
"""
from collections import Counter
from typing import Dict, Iterable, List, Optional

from models.assessment_models import ConstructId as C, DimensionId as D, Question
from shared.exceptions import ConfigurationError
from .constructs import CONSTRUCTS, USER_DIMENSIONS

QUESTIONS_PER_CONSTRUCT = 3

ASSESSMENT_QUESTIONS = (
    # DS1: Scrolling Frequency & Engagement
    Question(id="q1", original_item="DS1_1", construct=C.FREQUENCY, dimension=D.TIME_MANAGEMENT,
             text="I check social media news feeds multiple times throughout the day."),
    Question(id="q2", original_item="DS1_4", construct=C.FREQUENCY, dimension=D.TIME_MANAGEMENT,
             text="I spend a significant portion of my free time scrolling through social media."),
    Question(id="q3", original_item="DS1_7", construct=C.FREQUENCY, dimension=D.TIME_MANAGEMENT,
             text="Scrolling through news and social media is one of my main daily activities."),

    # DS2: Loss of Control
    Question(id="q4", original_item="DS2_2", construct=C.CONTROL, dimension=D.BEHAVIORAL_CONTROL,
             text="I find it hard to stop scrolling even when I want to."),
    Question(id="q5", original_item="DS2_5", construct=C.CONTROL, dimension=D.BEHAVIORAL_CONTROL,
             text="I often scroll longer than I originally planned."),
    Question(id="q6", original_item="DS2_8", construct=C.CONTROL, dimension=D.BEHAVIORAL_CONTROL,
             text="I feel like I can't control my scrolling behavior."),

    # DS3: Emotional Impact
    Question(id="q7", original_item="DS3_1", construct=C.EMOTIONAL, dimension=D.EMOTIONAL_WELLBEING,
             text="Reading negative news on social media makes me feel anxious or worried."),
    Question(id="q8", original_item="DS3_4", construct=C.EMOTIONAL, dimension=D.EMOTIONAL_WELLBEING,
             text="I often feel sad or hopeless after scrolling through news feeds."),
    Question(id="q9", original_item="DS3_7", construct=C.EMOTIONAL, dimension=D.EMOTIONAL_WELLBEING,
             text="My mood significantly worsens after spending time on social media."),

    # DS4: Time Distortion
    Question(id="q10", original_item="DS4_2", construct=C.TIME, dimension=D.TIME_MANAGEMENT,
             text="I often lose track of time when scrolling through social media."),
    Question(id="q11", original_item="DS4_5", construct=C.TIME, dimension=D.TIME_MANAGEMENT,
             text="Minutes turn into hours when I'm scrolling without me realizing it."),
    Question(id="q12", original_item="DS4_8", construct=C.TIME, dimension=D.TIME_MANAGEMENT,
             text="I'm often surprised by how much time has passed while I was scrolling."),

    # DS5: Compulsive Checking
    Question(id="q13", original_item="DS5_1", construct=C.COMPULSIVE, dimension=D.BEHAVIORAL_CONTROL,
             text="I feel a strong urge to check social media regularly."),
    Question(id="q14", original_item="DS5_4", construct=C.COMPULSIVE, dimension=D.BEHAVIORAL_CONTROL,
             text="I check social media first thing in the morning, even before getting out of bed."),
    Question(id="q15", original_item="DS5_7", construct=C.COMPULSIVE, dimension=D.BEHAVIORAL_CONTROL,
             text="I feel uncomfortable or anxious if I can't check social media for a while."),

    # DS6: Harm Awareness (protective)
    Question(id="q16", original_item="DS6_2", construct=C.AWARENESS, dimension=D.SELF_AWARENESS,
             text="I'm aware that my scrolling habits might not be good for my mental health."),
    Question(id="q17", original_item="DS6_5", construct=C.AWARENESS, dimension=D.SELF_AWARENESS,
             text="I recognize that constant news consumption affects my wellbeing."),
    Question(id="q18", original_item="DS6_8", construct=C.AWARENESS, dimension=D.SELF_AWARENESS,
             text="I know I should probably reduce my social media use."),

    # DS7: Life Interference
    Question(id="q19", original_item="DS7_2", construct=C.INTERFERENCE, dimension=D.DAILY_FUNCTIONING,
             text="My scrolling habits interfere with completing my work or responsibilities."),
    Question(id="q20", original_item="DS7_5", construct=C.INTERFERENCE, dimension=D.DAILY_FUNCTIONING,
             text="I've stayed up late scrolling when I should have been sleeping."),
    Question(id="q21", original_item="DS7_8", construct=C.INTERFERENCE, dimension=D.DAILY_FUNCTIONING,
             text="Scrolling has caused me to neglect important activities or relationships."),

    # DS8: Coping Motivation
    Question(id="q22", original_item="DS8_2", construct=C.COPING, dimension=D.EMOTIONAL_WELLBEING,
             text="I scroll through social media to distract myself from stress or problems."),
    Question(id="q23", original_item="DS8_5", construct=C.COPING, dimension=D.EMOTIONAL_WELLBEING,
             text="I use social media as a way to cope with negative emotions."),
    Question(id="q24", original_item="DS8_8", construct=C.COPING, dimension=D.EMOTIONAL_WELLBEING,
             text="When I'm bored or lonely, I automatically turn to scrolling."),
)


def validate_catalog(questions: Iterable[Question] = ASSESSMENT_QUESTIONS,
                     constructs=CONSTRUCTS,
                     dimensions=USER_DIMENSIONS) -> None:
    """
    Check that every question points at a configured construct and dimension,
    that ids are unique, that each construct has exactly QUESTIONS_PER_CONSTRUCT
    items and that the construct -> dimension mapping is many-to-one.

    Raises:
        ConfigurationError: on the first inconsistency found
    """
    questions = list(questions)
    construct_ids = {c.id for c in constructs}
    dimension_ids = {d.id for d in dimensions}

    duplicates = [qid for qid, count in Counter(q.id for q in questions).items() if count > 1]
    if duplicates:
        raise ConfigurationError(f"Duplicate question ids in catalog: {duplicates}")

    construct_to_dimension = {}
    for q in questions:
        if q.construct_id not in construct_ids:
            raise ConfigurationError(f"Question {q.id} references unknown construct: {q.construct_id}")
        if q.dimension not in dimension_ids:
            raise ConfigurationError(f"Question {q.id} references unknown dimension: {q.dimension}")

        mapped = construct_to_dimension.setdefault(q.construct_id, q.dimension)
        if mapped != q.dimension:
            raise ConfigurationError(
                f"Construct {q.construct_id.value} feeds both {mapped.value} and {q.dimension.value}"
            )

    per_construct = Counter(q.construct_id for q in questions)
    for construct_id in construct_ids:
        if per_construct.get(construct_id, 0) != QUESTIONS_PER_CONSTRUCT:
            raise ConfigurationError(
                f"Construct {construct_id.value} has {per_construct.get(construct_id, 0)} questions, "
                f"expected {QUESTIONS_PER_CONSTRUCT}"
            )

    protective = [d.id for d in dimensions if d.is_protective]
    if len(protective) != 1:
        raise ConfigurationError(f"Expected exactly one protective dimension, found {len(protective)}")


validate_catalog()

QUESTIONS_BY_ID: Dict[str, Question] = {q.id: q for q in ASSESSMENT_QUESTIONS}

# Mapping from question IDs to original dataset columns
QUESTION_TO_DATASET_MAP: Dict[str, str] = {q.id: q.original_item for q in ASSESSMENT_QUESTIONS}


def get_question(question_id: str) -> Optional[Question]:
    return QUESTIONS_BY_ID.get(question_id)


def get_questions_by_dimension(dimension_id) -> List[Question]:
    return [q for q in ASSESSMENT_QUESTIONS if q.dimension == dimension_id]


def get_questions_by_construct(construct_id) -> List[Question]:
    return [q for q in ASSESSMENT_QUESTIONS if q.construct_id == construct_id]


def get_total_question_count() -> int:
    return len(ASSESSMENT_QUESTIONS)
