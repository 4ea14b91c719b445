"""Static report content: pole descriptions and pairwise dynamics narratives."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PoleContent(BaseModel):
    """Narrative content for a single RIASEC dimension."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=5)
    traits: str = Field(..., min_length=1)  # comma separated adjectives
    quotes: list[str] = Field(default_factory=list)

    def adjectives(self) -> list[str]:
        """Split ``traits`` into capitalised adjectives, dropping empties."""
        result: list[str] = []
        for raw in self.traits.split(","):
            cleaned = raw.strip().replace(".", "")
            if cleaned:
                result.append(cleaned[0].upper() + cleaned[1:])
        return result


RIASEC_DESCRIPTIONS: dict[str, PoleContent] = {
    "R": PoleContent(
        title="THE REALISTIC POLE",
        description=(
            "People in the Realistic pole favour concrete, practical and physical activities. "
            "They like to use their body, handle objects, tools and machinery, or work in contact "
            "with nature and animals. Their approach to life is pragmatic: they would rather see "
            "tangible results than get lost in abstract speculation or theoretical debate. Often "
            "well coordinated and skilled with their hands, they value clarity and operational "
            "autonomy. They can come across as reserved, frank and direct, avoiding emotional or "
            "diplomatic complexity. At work they look for stability, well defined tasks and the "
            "chance to act directly on material reality."
        ),
        traits="Practical, concrete, frank, reserved, natural, persistent, steady, genuine.",
        quotes=[
            "I need to be in shape to give my best, and I often go to bed early.",
            "I take my work to heart. Early in my studies I constantly needed to do well and be appreciated by my teachers.",
            "It is often discussions that make us waste time.",
            "Cleverness is often a thousand times more effective than the grand reasoning school teaches us.",
        ],
    ),
    "I": PoleContent(
        title="THE INVESTIGATIVE POLE",
        description=(
            "People with an Investigative dominant are driven by deep intellectual curiosity and "
            "by the wish to understand the why and the how of things. They like to observe, learn, "
            "analyse and solve complex problems through logic and scientific method. They are often "
            "introspective, independent and oriented towards abstract thinking. They dislike rigid "
            "rules and purely repetitive tasks that do not stimulate the mind. At work they seek "
            "autonomy to explore ideas, run research or develop new skills. They tend to be "
            "critical, rational and precise, preferring intellectual exchange to purely social or "
            "persuasive dynamics."
        ),
        traits="Analytical, curious, independent, intellectual, precise, rational, critical, introspective.",
        quotes=[
            "What matters to me is that there is always something new in the job, something to learn.",
            "Everything evolves, and that is what lets me keep learning. I love it.",
            "The more we know, the more ways of working we learn, the more we want to keep learning.",
            "I do not care what others think of the way I work. What matters is understanding how to do my job well.",
        ],
    ),
    "A": PoleContent(
        title="THE ARTISTIC POLE",
        description=(
            "The Artistic pole gathers people who feel the need to express their individuality and "
            "creativity. They are intuitive, original, expressive and often non-conformist. They "
            "enjoy activities that let them create something new or interpret reality through art, "
            "writing, design or performance. They feel stifled in highly structured, bureaucratic "
            "or routine environments. For them work is an extension of their personality; they "
            "look for flexible settings that value imagination, aesthetics and innovation. In "
            "relationships they are often emotional and sensitive, able to catch nuances others miss."
        ),
        traits="Creative, imaginative, intuitive, original, sensitive, expressive, idealistic, non-conformist.",
        quotes=[
            "The hardest thing for me is knowing I could create something really interesting at work but having no experience to prove it.",
            "Independent work leaves room for imagination and initiative.",
            "It really is my dream: total freedom over my work, being judged only on results.",
            "I do not understand my boss at all. Neither the way he acts nor the way he is.",
        ],
    ),
    "S": PoleContent(
        title="THE SOCIAL POLE",
        description=(
            "People with a strong Social nature find their fullest expression in activities that "
            "require human contact, cooperation and helping others. They are empathetic, "
            "communicative, understanding and responsible. They like to teach, care for, inform or "
            "train others. They prefer to solve problems through dialogue and cooperation rather "
            "than with tools or cold analysis. They enjoy teamwork and need relational harmony. "
            "They avoid jobs that require isolation or mechanical activity without human contact, "
            "and are often skilled at understanding the feelings of others and creating a "
            "supportive, welcoming climate."
        ),
        traits="Cooperative, friendly, generous, empathetic, persuasive, patient, responsible, warm.",
        quotes=[
            "It is very rare that I cannot get along with someone. Maybe because I never try to judge, I prefer to understand.",
            "The problem in a group is that nobody necessarily appreciates you. Sometimes that makes me lose confidence.",
            "In the office everyone keeps to themselves. It is really sad. A pleasant workplace is one that lets you show your best.",
        ],
    ),
    "E": PoleContent(
        title="THE ENTERPRISING POLE",
        description=(
            "Enterprising people are energetic, ambitious and self-confident. They like to take "
            "leadership roles, persuade others and manage projects or people to reach "
            "organisational or economic goals. They are motivated by success, status, earnings and "
            "the chance to influence their surroundings. They enjoy competition and see problems "
            "as challenges to win. They prefer action and quick decisions to prolonged analysis or "
            "theory, often have excellent speaking skills and know how to sell their ideas. They "
            "tend to avoid activities that demand too much patience, passive observation or "
            "meticulous precision without visibility."
        ),
        traits="Energetic, ambitious, dominant, optimistic, sociable, self-confident, enterprising.",
        quotes=[
            "For me work is competition, and earnings matter a great deal.",
            "My greatest fear is staying stuck in one place with no prospects for growth.",
            "During my internship I found my true calling: convincing even the least convinced that this is the product they need.",
        ],
    ),
    "C": PoleContent(
        title="THE CONVENTIONAL POLE",
        description=(
            "The Conventional pole describes people who value order, structure and clarity. They "
            "are methodical, organised, precise and reliable. They like working with data, numbers "
            "and defined procedures, making sure everything runs to plan. They are at ease in "
            "hierarchical environments where expectations are clear and rules well defined. They "
            "avoid ambiguous, unstructured situations or those requiring excessive improvisation. "
            "They are guardians of efficiency and quality, excelling at administration, accounting "
            "and process control. Their strength lies in consistency and attention to detail."
        ),
        traits="Methodical, organised, precise, efficient, dogmatic, conformist, cautious.",
        quotes=[
            "Once I joined my company I realised that what we learned at school was not really the best method.",
            "At first I was rather lost and did not fully understand how things worked. Now it is better, I have adapted.",
            "What I do not like about my job is that our boss does not always know what he wants.",
        ],
    ),
}


# Keyed by the two letters sorted alphabetically.
RIASEC_PAIRS: dict[str, str] = {
    "IR": (
        "People who like working on the development of new products. They have great respect "
        "for every form of teaching and enjoy being in touch with specialists. They are drawn to "
        "concrete problems and look for tangible results."
    ),
    "AR": (
        "People who like to create with their hands and generally prefer creative activities "
        "using objects, tools and concrete materials."
    ),
    "RS": (
        "People who prefer working in practical organisation or in sport. They like helping "
        "others through concrete actions rather than words."
    ),
    "ER": (
        "People who can lead operational groups, with a preference for teams carrying out "
        "practical and tangible tasks."
    ),
    "CR": (
        "Particularly stable people with a practical spirit. They need clear goals and like to "
        "plan their working day without surprises."
    ),
    "AI": (
        "People who do not feel at home in overly conformist environments. Very creative, they "
        "tie imagination to intellect and love design and conceptual innovation."
    ),
    "IS": (
        "Optimistic and positive people, interested in human behaviour more than abstract "
        "theory. They prefer small groups to find solutions to problems."
    ),
    "EI": (
        "Rare people who combine reflection and action. Highly valued in applied research, "
        "strategic marketing and product development."
    ),
    "CI": (
        "People who need recognition in their field of specialisation. Very gifted for "
        "forecasting, statistical studies and risk calculation."
    ),
    "AS": (
        "People who like to use their intuition and emotions to help others. They often dream "
        "of changing the world and are little motivated by money alone."
    ),
    "AE": (
        "Expressive and independent people who like environments where they can act without "
        "too many constraints. They seek individual performance and creative selling."
    ),
    "AC": (
        "People who use their imagination to devise more effective working methods. They "
        "combine creativity with organisational rigour."
    ),
    "ES": (
        "People who like to manage a team or run a business. At ease in human relations, they "
        "sell ideas, services or products with enthusiasm."
    ),
    "CS": (
        "People who like teamwork with defined goals. Valued in internal and organisational "
        "communication, they enjoy positions of trust that require precision."
    ),
    "CE": (
        "People who like tangible, quantifiable results. Very gifted for financial and "
        "organisational management, they like making decisions and being in control."
    ),
}


def pair_key(a: str, b: str) -> str:
    """Alphabetically sorted two-letter key for a dimension pair."""
    return "".join(sorted((a, b)))
