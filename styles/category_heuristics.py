from __future__ import annotations

from typing import Dict, List, TypedDict


class TrendTemplate(TypedDict):
    headline: str
    rationale: str


class CategoryProfile(TypedDict):
    id: str
    label: str

    # Matched at word boundaries against topic (weight 2) and keywords (weight 1).
    triggers: List[str]

    # Category terms appended after the brief keywords in SEO/upload tags.
    tags: List[str]

    positioning: str
    angle_focus: str

    # Vocabulary slotted into outline, script and planner templates.
    pain_point: str
    core_unit: str
    proof_device: str
    success_metric: str
    visual_motif: str
    thumbnail_palette: str

    trend_templates: List[TrendTemplate]
    question_stems: List[str]
    competitors: List[str]
    playlist_themes: List[str]
    community_stems: List[str]
    cross_promo: List[str]

    # archetype id -> title template
    title_overrides: Dict[str, str]


class ToneProfile(TypedDict):
    angle_lead: str
    stance: str
    benefit_clause: str
    hook_opener: str
    transition: str
    final_transition: str
    opening_hook: str
    mid_hook: str
    cta_lead: str
    thumbnail_emotion: str
    music_mood: str
    tag_suffix: str


class SectionArchetype(TypedDict):
    id: str
    title: str
    weight: int
    purpose: str
    talking_points: List[str]


GENERAL_CATEGORY_ID = "general"

# Weights are integer shares of the runtime and sum to 100.
SECTION_ARCHETYPES: List[SectionArchetype] = [
    {
        "id": "hook",
        "title": "Cold Open Hook",
        "weight": 10,
        "purpose": "Stop the scroll: name the {pain_point} and promise a concrete payoff on {topic}.",
        "talking_points": [
            "Open on the sharpest version of the {pain_point}",
            "Promise the payoff: {success_metric}",
            "Preview the {core_unit} viewers will walk away with",
        ],
    },
    {
        "id": "context",
        "title": "Why {topic_title} Matters Now",
        "weight": 15,
        "purpose": "Frame the stakes for {audience} so the rest of the video feels urgent.",
        "talking_points": [
            "What changed recently around {keyword}",
            "The cost of ignoring the {pain_point}",
            "Where {audience} usually get stuck",
        ],
    },
    {
        "id": "framework",
        "title": "The Core {core_unit_title}",
        "weight": 30,
        "purpose": "Teach the repeatable {core_unit} behind {topic}, one step at a time.",
        "talking_points": [
            "Step 1: set up the foundation for {keyword}",
            "Step 2: apply the {core_unit} with {keyword2} in mind",
            "Step 3: measure progress with {success_metric}",
        ],
    },
    {
        "id": "proof",
        "title": "Case Study Breakdown",
        "weight": 20,
        "purpose": "Prove it works with a {proof_device}.",
        "talking_points": [
            "Set the scene with a real {proof_device}",
            "Walk through the decisions that moved {success_metric}",
            "Call out what you would repeat next time",
        ],
    },
    {
        "id": "pitfalls",
        "title": "Mistakes to Avoid",
        "weight": 10,
        "purpose": "Pre-empt the objections and errors that stall {audience}.",
        "talking_points": [
            "The most common misstep with {keyword}",
            "A quick fix for the {pain_point}",
            "How to recover when {keyword2} goes sideways",
        ],
    },
    {
        "id": "recap",
        "title": "Recap & Next Step",
        "weight": 15,
        "purpose": "Compress the lesson into one takeaway and hand off to the call to action.",
        "talking_points": [
            "Three-line recap of the {core_unit}",
            "The single action to take today",
            "Bridge into the call to action: {cta}",
        ],
    },
]


TONE_PROFILES: Dict[str, ToneProfile] = {
    "Authoritative": {
        "angle_lead": "Definitive playbook",
        "stance": "We lead with decisive, experience-backed recommendations rather than hedged opinions.",
        "benefit_clause": "The Definitive Playbook for {audience}",
        "hook_opener": "Here is the truth about {topic} most people never hear.",
        "transition": "Lock that in, because the next piece builds directly on it.",
        "final_transition": "Now put it to work: {cta}",
        "opening_hook": "Tell me in the comments where you are stuck with {topic} right now.",
        "mid_hook": "Pause here and note which step you would implement first.",
        "cta_lead": "If this playbook helped, take the next step:",
        "thumbnail_emotion": "Confident, direct-to-camera",
        "music_mood": "steady, low-key corporate pulse",
        "tag_suffix": "strategy",
    },
    "Educational": {
        "angle_lead": "Step-by-step walkthrough",
        "stance": "Every concept is explained from first principles with a clear example.",
        "benefit_clause": "A Step-by-Step Guide for {audience}",
        "hook_opener": "By the end of this video you will understand {topic} well enough to teach it.",
        "transition": "With that concept in place, let's move to the next building block.",
        "final_transition": "Ready to keep learning? {cta}",
        "opening_hook": "Comment one question you have about {topic} before we start.",
        "mid_hook": "Quick check: rewind if this step felt fast, it is the one everything else depends on.",
        "cta_lead": "Keep the learning going:",
        "thumbnail_emotion": "Curious, eyebrow-raised",
        "music_mood": "light, focused lo-fi",
        "tag_suffix": "tutorial",
    },
    "Inspirational": {
        "angle_lead": "Transformation story",
        "stance": "We show what becomes possible and make the first step feel achievable.",
        "benefit_clause": "How {audience} Can Finally Break Through",
        "hook_opener": "What if {topic} was the thing that changed everything for you this year?",
        "transition": "Hold on to that feeling, because the next part is where it gets real.",
        "final_transition": "Your next chapter starts now: {cta}",
        "opening_hook": "Drop a comment with the goal that brought you to {topic}.",
        "mid_hook": "Share this with someone who needs to hear it today.",
        "cta_lead": "Take the first step today:",
        "thumbnail_emotion": "Hopeful, looking toward the horizon",
        "music_mood": "uplifting cinematic build",
        "tag_suffix": "motivation",
    },
    "Entertaining": {
        "angle_lead": "High-energy breakdown",
        "stance": "We keep the pace quick and the jokes frequent without losing the substance.",
        "benefit_clause": "What Nobody Tells {audience}",
        "hook_opener": "I tried {topic} so you don't have to, and it got weird fast.",
        "transition": "But wait, it gets better.",
        "final_transition": "Before you go: {cta}",
        "opening_hook": "Rate your {topic} skills from 1 to 10 in the comments, honestly.",
        "mid_hook": "Smash like if you have made this exact mistake too.",
        "cta_lead": "Had fun? Then do this:",
        "thumbnail_emotion": "Shocked, wide-eyed reaction",
        "music_mood": "upbeat, bouncy pop",
        "tag_suffix": "explained",
    },
    "Analytical": {
        "angle_lead": "Data-driven teardown",
        "stance": "Every claim is tied to a measurable signal and the trade-offs are stated plainly.",
        "benefit_clause": "The Data-Backed Breakdown for {audience}",
        "hook_opener": "The numbers behind {topic} tell a very different story than the hype.",
        "transition": "Now that the baseline is clear, let's look at the next variable.",
        "final_transition": "If you want the full dataset and templates: {cta}",
        "opening_hook": "Comment the metric you track most closely for {topic}.",
        "mid_hook": "Screenshot this chart, you will want it for your own analysis.",
        "cta_lead": "Want the numbers behind this?",
        "thumbnail_emotion": "Focused, pointing at a rising chart",
        "music_mood": "minimal, pulsing electronic",
        "tag_suffix": "analysis",
    },
}

DEFAULT_TONE = "Authoritative"


def _base_profile(category_id: str, label: str) -> CategoryProfile:
    return {
        "id": category_id,
        "label": label,

        "triggers": [],
        "tags": ["how to", "step by step guide", "tips and strategies"],

        "positioning": (
            "Position {topic} as the practical, no-fluff resource {audience} keep coming back to "
            "when they need an answer they can act on the same day."
        ),
        "angle_focus": "that turns {topic} into a repeatable system",

        "pain_point": "overwhelm from conflicting advice",
        "core_unit": "framework",
        "proof_device": "before-and-after walkthrough",
        "success_metric": "time saved each week",
        "visual_motif": "clean desk setup with annotated overlays",
        "thumbnail_palette": "yellow and charcoal",

        "trend_templates": [
            {
                "headline": "Search demand for {keyword} is compounding",
                "rationale": "Evergreen how-to searches around {topic} keep growing as {audience} look for trustworthy guides.",
            },
            {
                "headline": "Long-form explainers are outperforming quick tips",
                "rationale": "Viewers researching {keyword} reward depth; a {minutes}-minute structured breakdown fits that intent.",
            },
            {
                "headline": "Community-driven questions shape the conversation",
                "rationale": "Comment threads on {topic} videos surface recurring questions that a clear framework can answer.",
            },
        ],
        "question_stems": [
            "Where should a beginner start with {topic}?",
            "What is the biggest mistake people make with {topic}?",
            "How long does it take to see results from {topic}?",
            "Which tools actually matter for {topic}?",
        ],
        "competitors": [
            "Ali Abdaal",
            "Thomas Frank",
            "Matt D'Avella",
            "Nathaniel Drew",
            "Yes Theory",
        ],
        "playlist_themes": [
            "{topic_title} Fundamentals",
            "Step-by-Step Guides",
            "Viewer Questions Answered",
        ],
        "community_stems": [
            "Poll: what is your biggest challenge with {topic} right now?",
            "Share a photo of your {core_unit} in action and we'll feature the best ones.",
            "Which part of {topic} should we cover next? Vote in the comments.",
        ],
        "cross_promo": [
            "Cut a 45-second vertical teaser from the cold open for Shorts, Reels and TikTok.",
            "Turn the {core_unit} into a carousel post linking back to the full video.",
            "Send the recap as a newsletter issue with the video embedded above the fold.",
        ],
        "title_overrides": {},
    }


def _build_categories() -> List[CategoryProfile]:
    # Declaration order is the tie-break order for category resolution.
    categories: List[CategoryProfile] = []

    # -------------------------
    # TECHNOLOGY
    # -------------------------
    t = _base_profile("technology", "Technology & Software")
    t.update({
        "triggers": [
            "ai", "artificial intelligence", "software", "saas", "coding", "programming", "developer",
            "app", "automation", "tech", "gadget", "cloud", "machine learning", "python", "javascript",
        ],
        "tags": ["tech tutorial", "software workflow", "ai tools", "productivity tech"],
        "positioning": (
            "Position {topic} as the hands-on, tool-agnostic guide {audience} trust to separate real "
            "capability from launch-day hype."
        ),
        "angle_focus": "that turns {topic} into a shippable workflow",
        "pain_point": "tool sprawl and hype fatigue",
        "core_unit": "workflow",
        "proof_device": "live build from blank project to working result",
        "success_metric": "hours saved per sprint",
        "visual_motif": "screen recordings with zoomed code and UI callouts",
        "thumbnail_palette": "electric blue and black",
        "trend_templates": [
            {
                "headline": "{keyword_title} is moving from experiment to default",
                "rationale": "Teams are standardizing on {keyword}; {audience} want proof it survives real projects, not demos.",
            },
            {
                "headline": "Build-along videos beat feature roundups",
                "rationale": "Viewers researching {topic} stay longer when they watch something get built end to end.",
            },
            {
                "headline": "Skepticism is a growth lever",
                "rationale": "Honest limits and failure cases around {keyword} earn more trust than polished launch recaps.",
            },
        ],
        "question_stems": [
            "Is {topic} production-ready or still a toy?",
            "How do I fit {topic} into the stack I already have?",
            "What does {topic} cost once you scale past the free tier?",
            "Which skills does {topic} replace, and which does it make more valuable?",
        ],
        "competitors": ["Fireship", "Theo - t3.gg", "NetworkChuck", "Marques Brownlee", "ThePrimeagen"],
        "playlist_themes": ["{topic_title} Deep Dives", "Build-Alongs", "Tool Teardowns"],
        "community_stems": [
            "Poll: are you already using {topic} in production, testing it, or waiting?",
            "Share the one {core_unit} automation that saves you the most time.",
            "Drop your stack in the comments and we'll suggest where {topic} fits.",
        ],
        "cross_promo": [
            "Post the finished {core_unit} as a public template or repo linked in the description.",
            "Clip the live build into a 60-second vertical demo for Shorts and LinkedIn.",
            "Write a dev.to or newsletter recap with code snippets and a link back to the video.",
        ],
        "title_overrides": {"proof": "Live Build Walkthrough"},
    })
    categories.append(t)

    # -------------------------
    # DESIGN & CREATIVE
    # -------------------------
    d = _base_profile("design_and_creative", "Design & Creative")
    d.update({
        "triggers": [
            "design", "design system", "figma", "ui", "ux", "branding", "logo", "typography",
            "illustration", "photography", "creative", "animation",
        ],
        "tags": ["design process", "ui ux design", "creative workflow", "design tips"],
        "positioning": (
            "Position {topic} as the craft-first playbook that helps {audience} ship consistent, "
            "high-quality work without slowing the team down."
        ),
        "angle_focus": "that turns {topic} into a shared design language",
        "pain_point": "inconsistent work and endless revision loops",
        "core_unit": "design workflow",
        "proof_device": "before-and-after redesign",
        "success_metric": "review cycles cut per release",
        "visual_motif": "split-screen canvas recordings with component close-ups",
        "thumbnail_palette": "violet and off-white",
        "trend_templates": [
            {
                "headline": "{keyword_title} is reshaping design team rituals",
                "rationale": "{audience_cap} are rethinking handoff and review now that {keyword} removes busywork.",
            },
            {
                "headline": "Process videos outperform portfolio reels",
                "rationale": "Audiences searching {topic} want to see decisions being made, not only the polished result.",
            },
            {
                "headline": "Systems thinking is the new differentiator",
                "rationale": "Teams that codify {topic} into reusable parts ship faster and argue less about pixels.",
            },
        ],
        "question_stems": [
            "How do I get my team to actually adopt {topic}?",
            "What should {topic} standardize first?",
            "How do you measure whether {topic} is paying off?",
            "How does {topic} change the designer-developer handoff?",
        ],
        "competitors": ["The Futur", "DesignCourse", "Flux Academy", "Juxtopposed", "Figma"],
        "playlist_themes": ["{topic_title} Systems", "Redesign Breakdowns", "Design Ops Playbooks"],
        "community_stems": [
            "Show us your messiest component library; we'll pick one to clean up on stream.",
            "Poll: which part of {topic} causes the most friction on your team?",
            "Post your before-and-after and tag it with the video hashtag.",
        ],
        "cross_promo": [
            "Publish the {core_unit} as a free community file linked from the description.",
            "Turn the before-and-after into a Dribbble and Behance case study.",
            "Share three process frames as a LinkedIn carousel pointing back to the video.",
        ],
        "title_overrides": {"proof": "Before-and-After Redesign"},
    })
    categories.append(d)

    # -------------------------
    # CREATOR & MARKETING
    # -------------------------
    m = _base_profile("creator_and_marketing", "Creator Growth & Marketing")
    m.update({
        "triggers": [
            "youtube", "marketing", "seo", "content", "creator", "social media", "newsletter",
            "brand", "audience growth", "sales", "startup", "tiktok", "instagram", "podcast",
        ],
        "tags": ["content strategy", "creator growth", "marketing tips", "youtube strategy"],
        "positioning": (
            "Position {topic} as the growth playbook {audience} use to turn attention into a "
            "dependable pipeline instead of chasing the algorithm."
        ),
        "angle_focus": "that turns {topic} into a dependable growth engine",
        "pain_point": "posting consistently without growing",
        "core_unit": "content system",
        "proof_device": "channel analytics teardown",
        "success_metric": "click-through rate and returning viewers",
        "visual_motif": "analytics dashboards with highlighted growth curves",
        "thumbnail_palette": "red and white",
        "trend_templates": [
            {
                "headline": "{keyword_title} rewards depth over volume",
                "rationale": "Platforms are pushing satisfaction signals; {audience} who go deep on {topic} win distribution.",
            },
            {
                "headline": "Retention-first editing is the new baseline",
                "rationale": "A tight {minutes}-minute structure with clear chapters keeps viewers past the drop-off points.",
            },
            {
                "headline": "Owned audiences are back in focus",
                "rationale": "Creators pair {keyword} with email and community to reduce algorithm risk.",
            },
        ],
        "question_stems": [
            "How often should I publish to grow with {topic}?",
            "What metrics actually matter for {topic}?",
            "How do I stand out when everyone is already doing {topic}?",
            "How do I turn {topic} into revenue, not just views?",
        ],
        "competitors": ["Colin and Samir", "Think Media", "Paddy Galloway", "Vanessa Lau", "Ali Abdaal"],
        "playlist_themes": ["{topic_title} Playbooks", "Channel Teardowns", "Growth Experiments"],
        "community_stems": [
            "Drop your channel link and we'll review three in the next community post.",
            "Poll: what is holding back your {topic} results right now?",
            "Share one experiment you ran this month and what the data said.",
        ],
        "cross_promo": [
            "Publish the analytics teardown as an X/Twitter thread with the key chart.",
            "Cut the recap into a 30-second Short ending on the call to action.",
            "Offer the {core_unit} checklist as a lead magnet in the newsletter.",
        ],
        "title_overrides": {"proof": "Analytics Teardown"},
    })
    categories.append(m)

    # -------------------------
    # PERSONAL FINANCE
    # -------------------------
    f = _base_profile("personal_finance", "Personal Finance")
    f.update({
        "triggers": [
            "finance", "money", "budget", "budgeting", "investing", "invest", "stock", "retirement",
            "savings", "credit", "tax", "crypto", "debt", "mortgage", "index fund",
        ],
        "tags": ["personal finance", "money tips", "investing for beginners", "financial planning"],
        "positioning": (
            "Position {topic} as the calm, numbers-first guide {audience} rely on to make money "
            "decisions without fear or hype."
        ),
        "angle_focus": "that turns {topic} into a plan you can stick to",
        "pain_point": "money anxiety and decision paralysis",
        "core_unit": "money plan",
        "proof_device": "worked example with real numbers",
        "success_metric": "monthly savings rate",
        "visual_motif": "clean spreadsheets and animated compound-growth charts",
        "thumbnail_palette": "green and navy",
        "trend_templates": [
            {
                "headline": "Rate changes are reviving interest in {keyword}",
                "rationale": "{audience_cap} are re-running their numbers and searching for clear {topic} guidance.",
            },
            {
                "headline": "Transparent math beats hot takes",
                "rationale": "Viewers trust {topic} content that shows the spreadsheet, not just the conclusion.",
            },
            {
                "headline": "Automation is the new discipline",
                "rationale": "Set-and-forget systems around {keyword} outperform willpower-based advice.",
            },
        ],
        "question_stems": [
            "How much do I need to start with {topic}?",
            "What is the safest first step for {topic}?",
            "How does {topic} change if my income is irregular?",
            "What are the tax implications of {topic}?",
        ],
        "competitors": ["Ben Felix", "The Plain Bagel", "Graham Stephan", "Humphrey Yang", "Andrei Jikh"],
        "playlist_themes": ["{topic_title} Explained", "Money Basics", "Worked Examples"],
        "community_stems": [
            "Poll: which {topic} goal are you working on this quarter?",
            "Share (anonymously) the one money habit that changed your savings rate.",
            "Which number in today's example surprised you most?",
        ],
        "cross_promo": [
            "Share the {core_unit} spreadsheet template as a free download.",
            "Post the compound-growth chart as a standalone Short with a link to the full video.",
            "Answer the top viewer question as a follow-up community post.",
        ],
        "title_overrides": {"proof": "Worked Example With Real Numbers"},
    })
    categories.append(f)

    # -------------------------
    # FOOD & DRINK
    # -------------------------
    fd = _base_profile("food_and_drink", "Food & Drink")
    fd.update({
        "triggers": [
            "coffee", "cold brew", "espresso", "tea", "recipe", "cooking", "baking", "kitchen",
            "food", "meal prep", "barista", "bread", "cocktail", "wine", "grilling",
        ],
        "tags": ["recipe", "home cooking", "kitchen tips", "how to make"],
        "positioning": (
            "Position {topic} as the approachable, results-first guide {audience} follow to get "
            "cafe-quality results at home without specialist gear."
        ),
        "angle_focus": "that turns {topic} into a foolproof routine",
        "pain_point": "inconsistent results from batch to batch",
        "core_unit": "method",
        "proof_device": "side-by-side taste test",
        "success_metric": "consistent flavour every batch",
        "visual_motif": "overhead kitchen shots with macro texture close-ups",
        "thumbnail_palette": "warm amber and cream",
        "trend_templates": [
            {
                "headline": "At-home {keyword} is having a moment",
                "rationale": "{audience_cap} are trading cafe spend for home setups and searching for repeatable {topic} methods.",
            },
            {
                "headline": "Ratio-driven recipes beat vague instructions",
                "rationale": "Precise measurements for {keyword} reduce failed batches and earn saves and shares.",
            },
            {
                "headline": "Taste tests drive engagement",
                "rationale": "Side-by-side comparisons of {topic} variations spark debate in the comments.",
            },
        ],
        "question_stems": [
            "What equipment do I really need for {topic}?",
            "How do I fix {topic} when it turns out bitter or flat?",
            "How long does {topic} keep once it is made?",
            "Can I scale {topic} up for a crowd?",
        ],
        "competitors": ["James Hoffmann", "Joshua Weissman", "Babish Culinary Universe", "Ethan Chlebowski", "Pro Home Cooks"],
        "playlist_themes": ["{topic_title} at Home", "Kitchen Techniques", "Taste Tests"],
        "community_stems": [
            "Post a photo of your {topic} attempt and tell us the ratio you used.",
            "Poll: which variation from the taste test would you make first?",
            "What should we taste-test next? Suggestions in the comments.",
        ],
        "cross_promo": [
            "Share a printable {core_unit} card on Pinterest linking back to the video.",
            "Cut the pour or plating moment into a satisfying 15-second Reel.",
            "Send the ratios as a newsletter recipe card with the video embedded.",
        ],
        "title_overrides": {"framework": "The Step-by-Step Method", "proof": "Side-by-Side Taste Test"},
    })
    categories.append(fd)

    # -------------------------
    # HEALTH & FITNESS
    # -------------------------
    h = _base_profile("health_and_fitness", "Health & Fitness")
    h.update({
        "triggers": [
            "fitness", "workout", "gym", "nutrition", "running", "yoga", "sleep", "wellness",
            "strength", "training", "diet", "mobility", "marathon", "protein",
        ],
        "tags": ["fitness tips", "workout routine", "healthy habits", "evidence based fitness"],
        "positioning": (
            "Position {topic} as the evidence-informed, realistic routine {audience} can follow "
            "consistently, without extreme claims."
        ),
        "angle_focus": "that turns {topic} into a sustainable weekly routine",
        "pain_point": "starting strong and quitting by week three",
        "core_unit": "routine",
        "proof_device": "8-week progress log",
        "success_metric": "consistency streak",
        "visual_motif": "form demos from two angles with rep counters",
        "thumbnail_palette": "orange and slate",
        "trend_templates": [
            {
                "headline": "Evidence-based {keyword} content is winning trust",
                "rationale": "{audience_cap} are tired of fads and search for {topic} advice backed by studies.",
            },
            {
                "headline": "Minimum effective dose is the new hook",
                "rationale": "Time-efficient {keyword} routines fit real schedules and get saved for later.",
            },
            {
                "headline": "Progress logs build credibility",
                "rationale": "Showing real data over weeks makes {topic} outcomes believable.",
            },
        ],
        "question_stems": [
            "How many days a week do I need for {topic}?",
            "What should I do if {topic} causes soreness or pain?",
            "How soon will I notice results from {topic}?",
            "Do I need supplements or special gear for {topic}?",
        ],
        "competitors": ["Jeff Nippard", "Jeremy Ethier", "Renaissance Periodization", "Athlean-X", "Sydney Cummings Houdyshell"],
        "playlist_themes": ["{topic_title} Routines", "Form Checks", "Science-Based Training"],
        "community_stems": [
            "Post your week-one log and we'll check in on week four.",
            "Poll: what is your biggest barrier to {topic}: time, motivation, or knowledge?",
            "Share your favourite modification for beginners.",
        ],
        "cross_promo": [
            "Share the {core_unit} as a printable weekly tracker.",
            "Post a form-demo clip as a Short with on-screen cues.",
            "Invite viewers to a 30-day challenge thread in the community tab.",
        ],
        "title_overrides": {"proof": "8-Week Progress Log"},
    })
    categories.append(h)

    # -------------------------
    # EDUCATION & SCIENCE
    # -------------------------
    e = _base_profile("education_and_science", "Education & Science")
    e.update({
        "triggers": [
            "science", "history", "physics", "math", "mathematics", "learning", "study", "studying",
            "explained", "biology", "chemistry", "space", "psychology", "language",
        ],
        "tags": ["explained", "science education", "learn something new", "study tips"],
        "positioning": (
            "Position {topic} as the clearest explanation {audience} can find, built on intuition "
            "first and jargon last."
        ),
        "angle_focus": "that makes {topic} click intuitively",
        "pain_point": "explanations that bury intuition under jargon",
        "core_unit": "mental model",
        "proof_device": "worked problem solved on screen",
        "success_metric": "concepts you can explain back",
        "visual_motif": "animated diagrams and whiteboard sketches",
        "thumbnail_palette": "teal and white",
        "trend_templates": [
            {
                "headline": "Curiosity searches for {keyword} spike around news cycles",
                "rationale": "When {topic} shows up in headlines, {audience} look for an explainer they can trust.",
            },
            {
                "headline": "Visual intuition outperforms lecture formats",
                "rationale": "Animated explanations of {keyword} hold attention longer than talking-head lectures.",
            },
            {
                "headline": "Learners want to test themselves",
                "rationale": "Built-in checkpoints on {topic} turn passive watching into retention.",
            },
        ],
        "question_stems": [
            "What is the simplest way to understand {topic}?",
            "Why does {topic} matter in everyday life?",
            "What do most people get wrong about {topic}?",
            "What should I learn right after {topic}?",
        ],
        "competitors": ["Kurzgesagt", "Veritasium", "3Blue1Brown", "CrashCourse", "Khan Academy"],
        "playlist_themes": ["{topic_title} Explained", "Big Ideas, Simply", "Worked Problems"],
        "community_stems": [
            "Quiz: answer this {topic} question without rewinding.",
            "Which analogy made {topic} click for you?",
            "Suggest the next concept you want explained.",
        ],
        "cross_promo": [
            "Share the key diagram as an infographic on Pinterest and Reddit study communities.",
            "Post a 60-second 'one idea' Short distilled from the core {core_unit}.",
            "Offer a printable cheat sheet for teachers and students.",
        ],
        "title_overrides": {"framework": "Building the Mental Model", "proof": "Worked Problem"},
    })
    categories.append(e)

    # -------------------------
    # TRAVEL & OUTDOORS
    # -------------------------
    tr = _base_profile("travel_and_outdoors", "Travel & Outdoors")
    tr.update({
        "triggers": [
            "travel", "hiking", "camping", "backpacking", "van life", "road trip", "destination",
            "outdoor", "outdoors", "trail", "itinerary", "flight",
        ],
        "tags": ["travel guide", "travel tips", "outdoor adventure", "itinerary planning"],
        "positioning": (
            "Position {topic} as the honest, logistics-first guide {audience} use to plan trips "
            "that live up to the photos."
        ),
        "angle_focus": "that turns {topic} into a stress-free plan",
        "pain_point": "over-planned itineraries and tourist traps",
        "core_unit": "itinerary",
        "proof_device": "day-by-day trip log with real costs",
        "success_metric": "budget kept and stress avoided",
        "visual_motif": "drone establishing shots and map animations",
        "thumbnail_palette": "sky blue and sunset orange",
        "trend_templates": [
            {
                "headline": "Slow travel is reshaping {keyword} searches",
                "rationale": "{audience_cap} plan fewer, deeper trips and look for realistic {topic} guides.",
            },
            {
                "headline": "Real costs earn the click",
                "rationale": "Transparent budgets for {keyword} outperform aspirational montage edits.",
            },
            {
                "headline": "Off-season guides are underserved",
                "rationale": "Shoulder-season coverage of {topic} meets demand with less competition.",
            },
        ],
        "question_stems": [
            "How many days do I need for {topic}?",
            "What does {topic} really cost?",
            "What is overrated about {topic}?",
            "When is the best time of year for {topic}?",
        ],
        "competitors": ["Kara and Nate", "Lost LeBlanc", "Drew Binsky", "Eva zu Beck", "Kraig Adams"],
        "playlist_themes": ["{topic_title} Guides", "Budget Breakdowns", "Trip Logs"],
        "community_stems": [
            "Share your favourite hidden spot related to {topic}.",
            "Poll: would you rather go in peak season or shoulder season?",
            "Ask your logistics questions below; we'll answer the top ones.",
        ],
        "cross_promo": [
            "Publish the {core_unit} as a shareable Google Map linked in the description.",
            "Post the best drone shot as a Reel with the destination tagged.",
            "Write a blog post with the full cost breakdown and the video embedded.",
        ],
        "title_overrides": {"framework": "Building the Itinerary", "proof": "Day-by-Day Trip Log"},
    })
    categories.append(tr)

    # -------------------------
    # GAMING & ENTERTAINMENT
    # -------------------------
    g = _base_profile("gaming_and_entertainment", "Gaming & Entertainment")
    g.update({
        "triggers": [
            "gaming", "game", "esports", "speedrun", "movie", "film", "anime", "streaming",
            "twitch", "minecraft", "nintendo", "playstation", "xbox",
        ],
        "tags": ["gaming", "game analysis", "tips and tricks", "entertainment"],
        "positioning": (
            "Position {topic} as the smartest, most entertaining take {audience} can find, with "
            "real insight behind every joke."
        ),
        "angle_focus": "that reveals what makes {topic} tick",
        "pain_point": "surface-level takes that miss the interesting part",
        "core_unit": "breakdown",
        "proof_device": "frame-by-frame replay analysis",
        "success_metric": "average view duration",
        "visual_motif": "gameplay captures with freeze-frame annotations",
        "thumbnail_palette": "neon green and purple",
        "trend_templates": [
            {
                "headline": "Video essays on {keyword} are pulling long watch times",
                "rationale": "{audience_cap} want depth; analytical takes on {topic} keep viewers to the end.",
            },
            {
                "headline": "Clip culture feeds long-form discovery",
                "rationale": "Short highlight clips about {keyword} funnel viewers into full breakdowns.",
            },
            {
                "headline": "Community debates drive comments",
                "rationale": "Hot takes on {topic} that invite disagreement lift engagement signals.",
            },
        ],
        "question_stems": [
            "What makes {topic} so different from everything else?",
            "Is {topic} worth getting into right now?",
            "What is the most underrated part of {topic}?",
            "What are the pros doing with {topic} that casual fans miss?",
        ],
        "competitors": ["Game Maker's Toolkit", "NakeyJakey", "Jacksepticeye", "videogamedunkey", "Ludwig"],
        "playlist_themes": ["{topic_title} Breakdowns", "Deep Dives", "Hot Takes"],
        "community_stems": [
            "Poll: what is the most overrated thing about {topic}?",
            "Post your best moment and we'll react to the top picks.",
            "Tier list time: rank the key moments in the comments.",
        ],
        "cross_promo": [
            "Clip the most surprising moment as a Short with a hook caption.",
            "Stream a live Q&A on Twitch about the {core_unit} the week after launch.",
            "Share the annotated replay frames in the subreddit for the game or show.",
        ],
        "title_overrides": {"proof": "Frame-by-Frame Analysis"},
    })
    categories.append(g)

    # -------------------------
    # GENERAL (fallback, never matched by triggers)
    # -------------------------
    categories.append(_base_profile(GENERAL_CATEGORY_ID, "General Interest"))

    return categories


CATEGORIES: List[CategoryProfile] = _build_categories()
CATEGORIES_BY_ID: Dict[str, CategoryProfile] = {c["id"]: c for c in CATEGORIES}


def get_category(category_id: str) -> CategoryProfile:
    return CATEGORIES_BY_ID.get(category_id, CATEGORIES_BY_ID[GENERAL_CATEGORY_ID])


def get_tone_profile(tone: str) -> ToneProfile:
    return TONE_PROFILES.get(tone, TONE_PROFILES[DEFAULT_TONE])
