"""Scripted replies for the Sauti civic assistant."""

GREETING_RESPONSE = (
    "Hujambo! I'm Sauti, your civic assistant. I can help you with fact-checking, civic information, "
    "voting procedures, government services, and navigating this platform. What would you like to know?"
)
FACT_CHECK_RESPONSE = (
    "I can help you verify information! You can use our fact-checking tool on this platform, or ask me "
    "specific questions about claims you've heard. For the most accurate results, please provide the "
    "specific claim you'd like me to analyze."
)
VOTING_RESPONSE = (
    "For voting information in Kenya, you can register with IEBC (Independent Electoral and Boundaries "
    "Commission). Check our civic alerts section for current registration deadlines and polling station "
    "information. You need a valid national ID and must be 18 or older to register."
)
GOVERNMENT_SERVICES_RESPONSE = (
    "For government services in Kenya, you can visit eCitizen portal online or local Huduma Centers. "
    "Common services include permits, licenses, certificates, and tax services. Check our jobs section "
    "for current government opportunities too."
)
NAVIGATION_RESPONSE = (
    "I can guide you through SautiCheck! We have: News Feed (latest verified civic news), Fact Checker "
    "(verify claims), Civic Alerts (important announcements), Jobs Hub (employment opportunities), and "
    "Bookmarks (save articles). What specific feature would you like help with?"
)
NEWS_RESPONSE = (
    "Stay informed with our verified news feed! We cover Politics, Economy, Education, Health, and "
    "Infrastructure. All articles are fact-checked and sourced from reliable media outlets. You can filter "
    "by category or bookmark articles for later reading."
)
JOBS_RESPONSE = (
    "Check our Jobs Hub for verified employment opportunities from trusted organizations like Safaricom, "
    "Equity Bank, and government agencies. We offer full-time, part-time, contract, and internship "
    "positions across Kenya."
)
CIVIC_PARTICIPATION_RESPONSE = (
    "Great to hear you want to engage civically! Check our Civic Alerts for public participation "
    "opportunities, budget hearings, and community meetings. Stay informed through our news feed and "
    "always verify information before sharing."
)
DEFAULT_RESPONSE = (
    "I'm here to help with civic information, fact-checking, and navigating SautiCheck. You can ask me "
    "about voting procedures, government services, news verification, or how to use different features "
    "of this platform. What specific topic interests you?"
)

# Order matters: "hi" and "how" match inside many other words.
TOPICS = (
    (('hello', 'hi', 'hujambo'), GREETING_RESPONSE),
    (('fact check', 'verify', 'true', 'false'), FACT_CHECK_RESPONSE),
    (('vote', 'election', 'iebc'), VOTING_RESPONSE),
    (('government', 'service', 'permit', 'license'), GOVERNMENT_SERVICES_RESPONSE),
    (('how', 'navigate', 'use'), NAVIGATION_RESPONSE),
    (('news', 'information', 'update'), NEWS_RESPONSE),
    (('job', 'employment', 'work', 'career'), JOBS_RESPONSE),
    (('civic', 'participate', 'community'), CIVIC_PARTICIPATION_RESPONSE),
)


def respond(message: str) -> str:
    lowered = message.lower()
    for keywords, response in TOPICS:
        if any(keyword in lowered for keyword in keywords):
            return response
    return DEFAULT_RESPONSE
