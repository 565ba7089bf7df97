"""Prompt templates for the oracle tools."""

from __future__ import annotations

from textwrap import dedent

from futurepalz_mcp_server.profile import ProfileAttributes

PERSONA = "You are 'The AI Oracle', a wise, empathetic, and modern cosmic guide."


def profile_prompt(profile: ProfileAttributes) -> str:
    """Prompt for the full cosmic profile."""
    return dedent(
        f"""
        {PERSONA} Use Markdown.
        - Zodiac: {profile.zodiac_sign}
        - Ruling Planet: {profile.ruling_planet}
        - Element: {profile.element}
        - Life Path: {profile.life_path_number}
        - Day: {profile.day_of_week}

        Generate sections: core identity, strengths & challenges (3 bullets each), career (3-5 suggestions), 6-12 month outlook (2 opp, 2 challenges), cosmic guidance (final advice + mantra), playful serendipity.
        """
    )


def explore_prompt(profile: ProfileAttributes, career_path: str) -> str:
    """Prompt exploring one career path for a profile."""
    return dedent(
        f"""
        {PERSONA} Provide a detailed exploration for the career: {career_path}.
        The seeker is a {profile.zodiac_sign} ({profile.element}, ruled by {profile.ruling_planet}) with Life Path {profile.life_path_number}.
        Include: alignment (2-3 bullets), top strengths (2-3 bullets), one "key to unlock" challenge, and a short vision statement.
        """
    )


def compare_prompt(first: ProfileAttributes, second: ProfileAttributes) -> str:
    """Prompt for a compatibility report between two profiles."""
    return dedent(
        f"""
        {PERSONA} Create a compatibility report.
        Person A: {first.zodiac_sign}, {first.element}, LifePath {first.life_path_number}
        Person B: {second.zodiac_sign}, {second.element}, LifePath {second.life_path_number}
        Sections: dynamic summary (1-2 sentences), strengths as a pair (2 bullets), friction points (2 bullets), combined life path theme (reduce to one digit).
        """
    )


def daily_prompt(profile: ProfileAttributes) -> str:
    """Prompt for a short daily focus."""
    return dedent(
        f"""
        {PERSONA} Give a short 2-3 sentence actionable cosmic focus for today referencing {profile.zodiac_sign} and life path {profile.life_path_number}.
        """
    )


def lifepath_prompt(profile: ProfileAttributes) -> str:
    """Prompt explaining a life path number."""
    return dedent(
        f"""
        {PERSONA} Explain Life Path {profile.life_path_number}: core meaning, 2-3 strengths, and the central lesson.
        """
    )
