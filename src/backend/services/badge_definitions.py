"""
Badge rule table.

Every badge is computed on the fly from a user's stats snapshot. The table
order is the display order and the tie-break order for the next-goal
recommendation, so new badges are appended within their section.
"""

from models.badge import BadgeCategory, BadgeDefinition, BadgeTier, Progress, ProgressFn


def counter(field: str, threshold: int) -> ProgressFn:
    """Progress rule: a stats counter measured against a fixed threshold."""

    def progress(stats) -> Progress:
        return Progress(current=getattr(stats, field), max=threshold)

    return progress


def flag(field: str) -> ProgressFn:
    """Progress rule: a boolean stats flag counts as 1 of 1 when set."""

    def progress(stats) -> Progress:
        return Progress(current=1 if getattr(stats, field) else 0, max=1)

    return progress


def has_role(role: str) -> ProgressFn:
    """Progress rule: 1 of 1 when the user holds the given role."""

    def progress(stats) -> Progress:
        return Progress(current=1 if stats.role == role else 0, max=1)

    return progress


def weekly_rank_within(best: int, worst: int) -> ProgressFn:
    """Progress rule: 1 of 1 when the weekly leaderboard rank is in [best, worst]."""

    def progress(stats) -> Progress:
        return Progress(current=1 if best <= stats.weekly_rank <= worst else 0, max=1)

    return progress


def _badge(
    id: str,
    name: str,
    description: str,
    icon: str,
    category: BadgeCategory,
    tier: BadgeTier,
    criteria: int,
    progress_fn: ProgressFn,
) -> BadgeDefinition:
    return BadgeDefinition(
        id=id,
        name=name,
        description=description,
        icon=icon,
        category=category,
        tier=tier,
        criteria=criteria,
        progress_fn=progress_fn,
    )


def _milestones(
    field: str,
    category: BadgeCategory,
    steps: list[tuple[str, str, str, str, BadgeTier, int]],
) -> list[BadgeDefinition]:
    """Build a run of badges that all measure the same counter."""
    return [
        _badge(id, name, description, icon, category, tier, threshold, counter(field, threshold))
        for id, name, description, icon, tier, threshold in steps
    ]


Bronze, Silver, Gold, Diamond = BadgeTier.BRONZE, BadgeTier.SILVER, BadgeTier.GOLD, BadgeTier.DIAMOND


BADGE_DEFINITIONS: tuple[BadgeDefinition, ...] = (
    # Pin creation
    *_milestones(
        "pins_created",
        BadgeCategory.PINS,
        [
            ("first_step", "First Step", "Created your first pin", "🌱", Bronze, 1),
            ("pin_dropper", "Pin Dropper", "Created 5 pins", "📌", Bronze, 5),
            ("map_maker", "Map Maker", "Created 25 pins", "🗺️", Silver, 25),
            ("civic_champion", "Civic Champion", "Created 50 pins", "🏙️", Gold, 50),
            ("community_hero", "Community Hero", "Created 100 pins", "🌟", Diamond, 100),
            ("legend", "Legend", "Created 250 pins", "👑", Diamond, 250),
        ],
    ),
    # Engagement
    *_milestones(
        "comments_made",
        BadgeCategory.ENGAGEMENT,
        [
            ("voice", "Voice", "Posted your first comment", "💭", Bronze, 1),
            ("conversationalist", "Conversationalist", "Made 10 comments", "🗣️", Bronze, 10),
            ("community_voice", "Community Voice", "Made 50 comments", "📢", Silver, 50),
            ("insightful", "Insightful", "Made 100 comments", "🎯", Gold, 100),
        ],
    ),
    # Voting
    *_milestones(
        "votes_cast",
        BadgeCategory.VOTING,
        [
            ("voter", "Voter", "Cast your first vote", "👆", Bronze, 1),
            ("fair_judge", "Fair Judge", "Cast 25 votes", "⚖️", Bronze, 25),
            ("civic_judge", "Civic Judge", "Cast 100 votes", "🎖️", Silver, 100),
            ("voice_of_people", "Voice of the People", "Cast 500 votes", "⭐", Gold, 500),
        ],
    ),
    # Verification
    *_milestones(
        "verifications_made",
        BadgeCategory.VERIFICATION,
        [
            ("verifier", "Verifier", "Verified your first pin", "🔍", Bronze, 1),
            ("trusted_eye", "Trusted Eye", "Verified 10 pins", "✅", Bronze, 10),
            ("guardian", "Guardian", "Verified 50 pins", "🛡️", Silver, 50),
            ("truth_seeker", "Truth Seeker", "Verified 100 pins", "🏆", Gold, 100),
        ],
    ),
    # NGOs and events (interleaved, not grouped by counter)
    _badge(
        "connector", "Connector", "Added your first NGO", "🤝",
        BadgeCategory.NGO_EVENTS, Bronze, 1, counter("ngos_created", 1),
    ),
    _badge(
        "network_builder", "Network Builder", "Added 5 NGOs", "🏛️",
        BadgeCategory.NGO_EVENTS, Silver, 5, counter("ngos_created", 5),
    ),
    _badge(
        "event_organizer", "Event Organizer", "Created your first event", "📅",
        BadgeCategory.NGO_EVENTS, Bronze, 1, counter("events_created", 1),
    ),
    _badge(
        "community_builder", "Community Builder", "Created 5 events", "🎉",
        BadgeCategory.NGO_EVENTS, Silver, 5, counter("events_created", 5),
    ),
    _badge(
        "change_maker", "Change Maker", "Added 10 NGOs", "🌍",
        BadgeCategory.NGO_EVENTS, Gold, 10, counter("ngos_created", 10),
    ),
    # Suggestions
    *_milestones(
        "suggestions_made",
        BadgeCategory.SUGGESTIONS,
        [
            ("idea_spark", "Idea Spark", "Submitted your first suggestion", "💭", Bronze, 1),
            ("innovator", "Innovator", "Submitted 5 suggestions", "💡", Bronze, 5),
            ("visionary", "Visionary", "Submitted 15 suggestions", "🚀", Silver, 15),
            ("product_shaper", "Product Shaper", "Submitted 25 suggestions", "🎯", Gold, 25),
        ],
    ),
    _badge(
        "implemented", "Implemented", "Your suggestion was built!", "⭐",
        BadgeCategory.SUGGESTIONS, Diamond, 1, counter("suggestions_implemented", 1),
    ),
    # Streaks; current_streak keeps rising past the threshold
    *_milestones(
        "current_streak",
        BadgeCategory.STREAK,
        [
            ("on_fire", "On Fire", "7-day activity streak", "🔥", Bronze, 7),
            ("unstoppable", "Unstoppable", "30-day activity streak", "💪", Silver, 30),
            ("supercharged", "Supercharged", "100-day activity streak", "⚡", Diamond, 100),
        ],
    ),
    # Special achievements
    _badge(
        "problem_solver", "Problem Solver", "Had a pin marked as resolved", "🎯",
        BadgeCategory.SPECIAL, Silver, 1, counter("pins_resolved", 1),
    ),
    _badge(
        "high_impact", "High Impact", "Pin received 50+ upvotes", "🌟",
        BadgeCategory.SPECIAL, Gold, 1, counter("pins_with_50_upvotes", 1),
    ),
    _badge(
        "critical_reporter", "Critical Reporter", "Reported a critical issue (severity 9+)", "🚨",
        BadgeCategory.SPECIAL, Silver, 1, counter("critical_pins", 1),
    ),
    _badge(
        "photo_journalist", "Photo Journalist", "Added images to 10 pins", "📸",
        BadgeCategory.SPECIAL, Silver, 10, counter("pins_with_images", 10),
    ),
    _badge(
        "local_hero", "Local Hero", "10 pins in the same city", "📍",
        BadgeCategory.SPECIAL, Silver, 10, counter("max_pins_in_city", 10),
    ),
    _badge(
        "city_explorer", "City Explorer", "Reported issues in 5+ cities", "🌐",
        BadgeCategory.SPECIAL, Silver, 5, counter("cities_with_pins", 5),
    ),
    # Roles
    _badge(
        "verified_user", "Verified User", "Email verified", "👤",
        BadgeCategory.ROLE, Bronze, 1, flag("email_verified"),
    ),
    _badge(
        "reviewer", "Reviewer", "Appointed as reviewer", "🎖️",
        BadgeCategory.ROLE, Silver, 1, has_role("reviewer"),
    ),
    _badge(
        "ngo_partner", "NGO Partner", "NGO account", "🏢",
        BadgeCategory.ROLE, Silver, 1, has_role("ngo"),
    ),
    _badge(
        "admin", "Admin", "Platform administrator", "👑",
        BadgeCategory.ROLE, Diamond, 1, has_role("admin"),
    ),
    # Weekly leaderboard
    _badge(
        "weekly_champion", "Weekly Champion", "#1 on weekly leaderboard", "🥇",
        BadgeCategory.LEADERBOARD, Gold, 1, weekly_rank_within(1, 1),
    ),
    _badge(
        "weekly_star", "Weekly Star", "#2 on weekly leaderboard", "🥈",
        BadgeCategory.LEADERBOARD, Silver, 1, weekly_rank_within(2, 2),
    ),
    _badge(
        "weekly_rising", "Weekly Rising", "#3 on weekly leaderboard", "🥉",
        BadgeCategory.LEADERBOARD, Bronze, 1, weekly_rank_within(3, 3),
    ),
    _badge(
        "top_10", "Top 10", "Top 10 contributor", "📊",
        BadgeCategory.LEADERBOARD, Silver, 1, weekly_rank_within(1, 10),
    ),
    # Account age
    *_milestones(
        "account_age_days",
        BadgeCategory.MILESTONE,
        [
            ("birthday", "Birthday", "1 year on Pin-It", "🎂", Silver, 365),
            ("veteran", "Veteran", "2 years on Pin-It", "🏅", Gold, 730),
        ],
    ),
    # Points
    *_milestones(
        "total_points",
        BadgeCategory.MILESTONE,
        [
            ("century", "Century", "100 total points", "💯", Bronze, 100),
            ("500_club", "500 Club", "500 total points", "🎯", Silver, 500),
            ("hall_of_fame", "Hall of Fame", "1000+ total points", "🏆", Diamond, 1000),
        ],
    ),
    # Community impact
    _badge(
        "helpful", "Helpful", "Comment received 10+ likes", "❤️",
        BadgeCategory.IMPACT, Silver, 1, counter("comments_with_10_likes", 1),
    ),
    _badge(
        "collaborator", "Collaborator", "Pin received 10+ comments", "🤝",
        BadgeCategory.IMPACT, Silver, 1, counter("pins_with_10_comments", 1),
    ),
    _badge(
        "influencer", "Influencer", "Pin saved by 10+ users", "📢",
        BadgeCategory.IMPACT, Gold, 1, counter("pins_with_10_saves", 1),
    ),
)


BADGES_BY_ID: dict[str, BadgeDefinition] = {badge.id: badge for badge in BADGE_DEFINITIONS}
