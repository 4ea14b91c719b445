"""The RIASEC questionnaire catalogue and flat item lookups.

Four sections: one forced-choice section of 30 paired statements and three
checklists (preferred environments, pastimes, five dream jobs).
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field

from jnana.riasec_types import (
    ChecklistSection,
    ForcedChoiceQuestion,
    ForcedChoiceSection,
    TestItem,
    TestSection,
)


# ---------------------------------------------------------------------------
# Raw catalogue: (question_id, prompt, (text_A, dims_A), (text_B, dims_B))
# ---------------------------------------------------------------------------
_FORCED_CHOICE: list[tuple[str, str, tuple[str, str], tuple[str, str]]] = [
    ("q1", "What I dislike most", ("Working alone", "SC"), ("Talking about myself", "RI")),
    ("q2", "I prefer", ("Act first, think later", "E"), ("Think before acting", "I")),
    ("q3", "In a group, I love", ("Taking the initiative", "E"), ("Bringing new ideas", "A")),
    ("q4", "My favourite pastime", ("Looking things up on the internet", "I"), ("Going to a party", "E")),
    ("q5", "People tell me I am", ("A down-to-earth person", "R"), ("A dreamer", "A")),
    ("q6", "When I have some free time", ("I enjoy a breath of fresh air", "R"), ("I spend time with friends", "S")),
    ("q7", "The subject that interests me most", ("Management", "C"), ("Philosophy", "A")),
    ("q8", "I admire people who are", ("Enterprising", "E"), ("Thoughtful", "I")),
    ("q9", "My main quality", ("My sense of organisation", "C"), ("My sense of aesthetics", "A")),
    ("q10", "Faced with a difficult situation", ("I confront it", "RE"), ("I tend to lose my temper", "")),
    ("q11", "What gives me most satisfaction", ("Helping others", "S"), ("Solving complicated problems", "I")),
    ("q12", "At the weekend I like", ("Doing DIY", "R"), ("Meeting friends", "S")),
    ("q13", "What stimulates me at work", ("Complicated problems to solve", "I"), ("Exchanging views with others", "S")),
    ("q14", "Above all I want to be", ("Useful", "S"), ("Conscientious", "C")),
    ("q15", "What attracts me", ("Technical activities", "R"), ("Anything to do with imagination", "A")),
    ("q16", "What matters most to me", ("Communicating with others", "S"), ("Having impeccable personal organisation", "C")),
    ("q17", "I am rather", ("Authoritative", "E"), ("Original", "A")),
    ("q18", "In a meeting", ("I do not like taking the floor", "R"), ("I like being in the spotlight", "E")),
    ("q19", "I prefer", ("Working in a group", "S"), ("Constantly learning new things", "I")),
    ("q20", "I solve problems", ("By applying a method", "C"), ("By logical deduction", "I")),
    ("q21", "To work well I need", ("A good climate of trust", "S"), ("Clearly defined goals", "C")),
    ("q22", "To study well I need", ("Calm", "A"), ("Interesting subjects", "C")),
    ("q23", "On holiday I prefer", ("Meeting new people", "S"), ("Taking a solitary walk", "R")),
    ("q24", "At work I prefer", ("Working on concrete things", "R"), ("Using my creativity", "A")),
    ("q25", "I am rather", ("Reflective", "I"), ("Methodical", "C")),
    ("q26", "What motivates me is", ("Novelty", "A"), ("Success", "E")),
    ("q27", "Personally, I think that", ("Rules often stop you moving forward", "A"), ("Without some rules you cannot be effective", "C")),
    ("q28", "In a team, I am", ("The leader", "E"), ("The thinker", "I")),
    ("q29", "I think I am rather", ("Introverted", "R"), ("Extroverted", "E")),
    ("q30", "To organise myself better I need", ("To know what is expected of me", "C"), ("A certain degree of autonomy", "I")),
]

_ENVIRONMENTS: list[tuple[str, str]] = [
    ("Activities that encourage group work", "S"),
    ("Activities that favour manual skills and physical abilities", "R"),
    ("Activities where I can make decisions", "E"),
    ("Activities that let me solve complicated problems", "I"),
    ("Activities with goals oriented towards concrete action", "R"),
    ("Activities that need imagination", "A"),
    ("Activities whose goal is finding new solutions", "A"),
    ("Activities that require a strong spirit of individual initiative", "E"),
    ("Activities whose goals are clearly defined", "C"),
    ("Activities where you can contribute your own ideas", "A"),
    ("Activities that require technical knowledge and skills", "R"),
    ("Activities that require helping others", "S"),
    ("Activities that let you manage documents and organise your own work", "C"),
    ("Activities involving experiences outside the office", "E"),
    ("Activities in a field where you can take on responsibility", "E"),
    ("Activities that require intellectual knowledge and know-how", "I"),
    ("Activities whose goals are clearly defined and accepted by all", "C"),
    ("Activities preferably in the artistic field", "A"),
    ("Activities that offer the chance to develop strategies", "E"),
    ("Activities preferably carried out outdoors", "R"),
    ("Activities that require interpersonal skills", "S"),
    ("Activities preferably carried out in a non-directive atmosphere", "A"),
    ("Activities that offer the chance to develop concrete solutions to problems", "R"),
    ("Activities preferably in the social field", "S"),
    ("Activities that give the chance to develop innovative ways of doing things", "I"),
    ("Activities that offer contact with many different people", "E"),
    ("Environments that encourage dialogue and interaction", "S"),
    ("Activities that require specific technical skills", "R"),
    ("Environments that encourage the use of tools and machines", "R"),
    ("Activities that offer the chance to develop new ways of doing things", "A"),
    ("Friendly environments where you can share your ideas", "S"),
    ("Preferably administrative or financial activities", "C"),
    ("Environments that encourage competition", "E"),
    ("Environments that offer an escape from routine", "A"),
    ("Structured environments with regular working hours", "C"),
    ("Structured environments that let you carry projects forward", "E"),
    ("Environments that do not require working isolated from others", "S"),
    ("Environments that favour contact with expert, qualified people", "I"),
    ("Activities that give you the chance to show your abilities", "E"),
    ("Loosely structured environments with flexible working hours", "A"),
    ("Environments based on the collective organisation of work", "S"),
    ("Environments that encourage cooperative work", "S"),
    ("Structured environments offering regular, stable activities", "C"),
    ("Loosely structured environments that let people organise their own work", "I"),
    ("Environments based on a climate of trust", "S"),
    ("Environments that do not require excessive group discussion", "R"),
    ("Environments that let you work alone", "R"),
    ("Environments that do not require too many administrative checks", "A"),
    ("Environments that do not require too much execution work", "I"),
    ("Environments that do not require too much competition between people", "S"),
    ("Environments where you can be recognised for your creativity", "A"),
    ("Environments that do not require too many preliminary discussions", "R"),
    ("Environments where you can put your artistic flair into practice", "A"),
    ("Environments that let everyone find their place", "C"),
    ("Environments that let you take risks", "E"),
    ("Environments that let you work in a multidisciplinary team", "I"),
    ("Environments that let you gain practical experience", "R"),
    ("Environments that develop the team's sense of leadership", "E"),
    ("Environments that make the most of team spirit", "S"),
    ("Environments where you constantly learn new things", "I"),
]

_PASTIMES: list[tuple[str, str]] = [
    ("Attending a political meeting", "E"),
    ("Renovating an old house", "R"),
    ("Practising a combat sport", "E"),
    ("Playing chess", "I"),
    ("Attending a society event", "E"),
    ("Going to a concert or an exhibition", "A"),
    ("Learning a foreign language", "I"),
    ("Playing golf", "E"),
    ("Growing plants or flowers", "R"),
    ("Playing an instrument or listening to music", "A"),
    ("Doing sport", "R"),
    ("Helping friends solve their problems", "S"),
    ("Playing cards with the family", "S"),
    ("Walking in the woods", "R"),
    ("Skydiving", "E"),
    ("Looking things up on the internet", "I"),
    ("Inviting a few friends to dinner", "S"),
    ("Reading a novel or a poem", "A"),
    ("Spending an evening gambling in a casino", "E"),
    ("Repairing an electrical or electronic system", "R"),
    ("Hiking in the mountains", "R"),
    ("Reading scientific magazines or books", "I"),
    ("Building scale models", "R"),
    ("Having fun with friends", "S"),
    ("Watching a documentary on television", "I"),
    ("Acting in a play", "A"),
    ("Tutoring struggling students", "S"),
    ("Visiting family", "S"),
    ("Horse riding", "R"),
    ("Collecting rare or precious objects", "A"),
    ("Settling a family or neighbourhood dispute", "S"),
    ("Doing a crossword", "I"),
    ("Attending a gala evening", "E"),
    ("Buying original clothes", "A"),
    ("Making your own clothes", "A"),
    ("Going clubbing with friends", "S"),
    ("Meeting new people", "E"),
    ("Going over a lesson you did not understand", "C"),
    ("Keeping my personal accounts", "C"),
    ("Attending conferences or seminars", "I"),
    ("Going abroad for the weekend", "E"),
    ("Cleaning the house", "C"),
    ("Sunbathing on a beach", "R"),
    ("Sculpting, painting or drawing", "A"),
    ("Looking after children", "S"),
    ("Cooking", "R"),
    ("Doing DIY at home", "R"),
    ("Talking with artists", "A"),
    ("Talking with specialists", "I"),
    ("Going to the cinema with my best friend", "S"),
    ("Attending a fashion show", "A"),
    ("Taking part in a competition", "E"),
    ("Learning to use drawing software", "A"),
    ("Attending a school meeting", "S"),
    ("Running an association", "C"),
    ("Working on a personal invention", "I"),
    ("Reading specialist magazines", "R"),
    ("Setting up an important project", "E"),
    ("Reviewing my lessons", "C"),
    ("Taking training courses", "I"),
]

_DREAM_JOBS: list[tuple[str, str]] = [
    ("Insurance agent", "E"),
    ("Estate agent", "E"),
    ("Financial analyst", "C"),
    ("Analyst programmer", "I"),
    ("Architect", "A"),
    ("Lawyer", "E"),
    ("Librarian", "C"),
    ("Biologist", "I"),
    ("Camera operator", "R"),
    ("Recruiter", "S"),
    ("Public relations officer", "E"),
    ("Taxi driver", "R"),
    ("Chief accountant", "C"),
    ("Site manager", "R"),
    ("Department head", "E"),
    ("Clown", "A"),
    ("Comedian", "A"),
    ("Captain", "E"),
    ("Bookkeeper", "C"),
    ("Ambulance driver", "R"),
    ("Senior educational counsellor", "S"),
    ("Financial controller", "C"),
    ("Costume designer", "A"),
    ("Fashion designer", "A"),
    ("Cook", "R"),
    ("Dentist", "R"),
    ("Designer", "A"),
    ("Dietitian", "I"),
    ("Writer", "A"),
    ("Editor", "A"),
    ("Early childhood educator", "S"),
    ("Horse trainer", "R"),
    ("Sports coach", "S"),
    ("Graphic designer", "A"),
    ("Horticulturist", "R"),
    ("Humorist", "A"),
    ("Illustrator", "A"),
    ("Printer", "R"),
    ("Nurse", "S"),
    ("Telecommunications engineer", "I"),
    ("Tax inspector", "C"),
    ("Technical equipment installer", "R"),
    ("Interpreter", "I"),
    ("Journalist", "A"),
    ("Judge", "E"),
    ("Bookseller", "C"),
    ("Mechanic", "R"),
    ("Doctor", "I"),
    ("Musician", "A"),
    ("Business owner", "E"),
    ("Landscape architect", "A"),
    ("Airline pilot", "R"),
    ("Primary school teacher", "S"),
    ("Dental technician", "R"),
    ("Psychologist", "S"),
    ("Sales representative", "E"),
    ("Humanitarian mission leader", "S"),
    ("Recreation centre manager", "S"),
    ("Bank branch manager", "E"),
    ("Export manager", "E"),
    ("Logistics manager", "C"),
    ("Sculptor", "A"),
    ("Secretary", "C"),
    ("Sociologist", "I"),
    ("Flight attendant", "S"),
    ("Quality control technician", "C"),
    ("Social worker", "S"),
    ("Car salesperson", "E"),
    ("Veterinarian", "I"),
    ("Webmaster", "I"),
]


def _checklist(section_id: str, prefix: str, rows: list[tuple[str, str]], **kwargs) -> ChecklistSection:
    return ChecklistSection(
        id=section_id,
        items=[
            TestItem(id=f"{prefix}{i}", text=text, impact_dimensions=list(dims))
            for i, (text, dims) in enumerate(rows, start=1)
        ],
        **kwargs,
    )


def build_riasec_questionnaire() -> list[TestSection]:
    """Build a fresh copy of the bundled questionnaire."""
    forced = ForcedChoiceSection(
        id="s1",
        title="Questionnaire 1: Your way of being",
        description=(
            "Here are 30 everyday situations. Pick the statement that describes you best. "
            "If neither fits completely, pick the closer one."
        ),
        questions=[
            ForcedChoiceQuestion(
                id=qid,
                text=prompt,
                options=[
                    TestItem(id=f"{qid}_A", text=a_text, impact_dimensions=list(a_dims)),
                    TestItem(id=f"{qid}_B", text=b_text, impact_dimensions=list(b_dims)),
                ],
            )
            for qid, prompt, (a_text, a_dims), (b_text, b_dims) in _FORCED_CHOICE
        ],
    )
    return [
        forced,
        _checklist(
            "s2", "s2_", _ENVIRONMENTS,
            title="Questionnaire 2: Preferred environments",
            description="Pick the activities you prefer. Select every entry that fits you.",
        ),
        _checklist(
            "s3", "s3_", _PASTIMES,
            title="Questionnaire 3: Favourite pastimes",
            description="Pick the pastimes you prefer from the list.",
        ),
        _checklist(
            "s4", "j", _DREAM_JOBS,
            title="Questionnaire 4: Your 5 dream jobs",
            description="Pick exactly 5 professions you would like to do or find interesting.",
            max_selection=5,
        ),
    ]


RIASEC_QUESTIONNAIRE: list[TestSection] = build_riasec_questionnaire()


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------
def iter_items(bank: Iterable[TestSection]) -> Iterator[TestItem]:
    """Yield every item and forced-choice option across all sections."""
    for section in bank:
        yield from section.iter_items()


def all_items(bank: Iterable[TestSection]) -> dict[str, TestItem]:
    """Flat ``id -> item`` lookup across both section kinds."""
    return {item.id: item for item in iter_items(bank)}


def bank_item_ids(bank: Iterable[TestSection]) -> set[str]:
    return {item.id for item in iter_items(bank)}


def duplicate_item_ids(bank: Iterable[TestSection]) -> list[str]:
    """Ids that occur more than once (should always be empty)."""
    counts = Counter(item.id for item in iter_items(bank))
    return [item_id for item_id, count in counts.items() if count > 1]


# ---------------------------------------------------------------------------
# Selection validation
# ---------------------------------------------------------------------------
class SelectionIssue(BaseModel):
    """A rule a selection breaks. Reported, never raised."""

    section_id: str
    kind: str  # "both_options" | "over_max_selection"
    detail: str
    item_ids: list[str] = Field(default_factory=list)


def validate_selection(selected_ids: set[str], bank: Iterable[TestSection]) -> list[SelectionIssue]:
    """Check a selection against forced-choice exclusivity and checklist caps."""
    issues: list[SelectionIssue] = []
    for section in bank:
        if isinstance(section, ForcedChoiceSection):
            for question in section.questions:
                chosen = [opt.id for opt in question.options if opt.id in selected_ids]
                if len(chosen) > 1:
                    issues.append(SelectionIssue(
                        section_id=section.id,
                        kind="both_options",
                        detail=f"Question {question.id} has both options selected",
                        item_ids=chosen,
                    ))
        elif section.max_selection is not None:
            chosen = [item.id for item in section.items if item.id in selected_ids]
            if len(chosen) > section.max_selection:
                issues.append(SelectionIssue(
                    section_id=section.id,
                    kind="over_max_selection",
                    detail=f"{len(chosen)} items selected, at most {section.max_selection} allowed",
                    item_ids=chosen,
                ))
    return issues


def select_option(selected_ids: set[str], question: ForcedChoiceQuestion, option_id: str) -> set[str]:
    """Return a new selection with *option_id* chosen and its sibling removed."""
    siblings = {opt.id for opt in question.options}
    if option_id not in siblings:
        raise ValueError(f"Option '{option_id}' does not belong to question '{question.id}'")
    return (selected_ids - siblings) | {option_id}
