"""Prompt templates and response schemas for Gemini extraction calls."""

import json

_STRING_LIST = {"type": "array", "items": {"type": "string"}}


def _string_list(description: str) -> dict:
    return {**_STRING_LIST, "description": description}


CANDIDATE_EXTRACTION_SCHEMA: dict = {
    "type": "object",
    "properties": {
        # Basic information
        "name": {"type": "string", "description": "Full name of the recruiting professional"},
        "email": {"type": "string", "description": "Email address if available"},
        "phone": {"type": "string", "description": "Phone number if available"},
        "location": {"type": "string", "description": "Current location/city/country"},
        "linkedin_url": {"type": "string", "description": "LinkedIn profile URL"},

        # Professional background
        "current_job_title": {"type": "string", "description": "Current job title/position"},
        "current_company": {"type": "string", "description": "Current company name"},
        "years_in_current_role": {"type": "number", "description": "Years in current position"},
        "total_years_experience": {
            "type": "number",
            "description": "Total years of professional recruiting experience",
        },

        # Recruiting specialization
        "industries": _string_list(
            "Industries they recruit for (e.g., Technology, FMCG, Healthcare, Finance, "
            "Manufacturing, Retail, Automotive, Pharma, Consulting)"
        ),
        "seniority_levels_placed": _string_list(
            "Seniority levels they typically place (e.g., Graduate, Junior, Mid-level, Senior, "
            "Manager, Director, VP, C-Level, Board)"
        ),
        "market_focus": _string_list(
            "Market segments they focus on (e.g., Local market, Expat candidates, Chinese "
            "returnees, Regional APAC, Global mobility, Niche specialists)"
        ),
        "recruitment_tools": _string_list(
            "Tools and platforms they use (e.g., LinkedIn Recruiter, Gllue, WeCom, Workday, "
            "Greenhouse, ATS systems, Boolean search, Xing, Indeed)"
        ),
        "sourcing_methods": _string_list(
            "Their approach and methodology (e.g., BD focused, Delivery only, 360 recruitment, "
            "Headhunting, Executive search, RPO, Contingency, Retained search)"
        ),

        # Performance & compensation
        "current_salary": {"type": "string", "description": "Current salary/compensation package"},
        "commission_structure": {
            "type": "string",
            "description": "Commission, bonus structure, or incentive plan",
        },
        "revenue_generated": {
            "type": "string",
            "description": "Revenue generated, billing targets, or placement fees achieved",
        },

        # AI analysis
        "ai_summary": {
            "type": "string",
            "description": "Professional summary highlighting key strengths, specializations, "
                           "and market positioning (2-3 sentences)",
        },
        "strengths": _string_list(
            "Key professional strengths, achievements, and competitive advantages"
        ),
        "red_flags": _string_list(
            "Potential concerns or risks (e.g., frequent job changes, employment gaps, unclear "
            "career progression)"
        ),
        "push_factors": _string_list(
            "Factors that might push them to leave their current role"
        ),
        "pull_factors": _string_list(
            "Factors that would attract them to new opportunities"
        ),
        "stay_factors": _string_list(
            "Factors that might keep them in their current role"
        ),
        "likelihood_score": {
            "type": "number",
            "minimum": 0,
            "maximum": 100,
            "description": "Likelihood of being open to new opportunities (0-100)",
        },

        # Qualitative insights
        "business_development_exposure": {
            "type": "string",
            "description": "Level of BD/sales exposure and client-facing experience",
        },
        "client_facing_strength": {
            "type": "string",
            "description": "Assessment of client relationship and communication skills",
        },
        "career_trajectory": {
            "type": "string",
            "description": "Analysis of career progression pattern",
        },
        "market_reputation": {
            "type": "string",
            "description": "Indicators of market standing and professional reputation",
        },
        "languages": _string_list(
            "Languages mentioned or inferred (e.g., English, Mandarin, Cantonese, Japanese)"
        ),
        "cultural_background": {
            "type": "string",
            "description": "Cultural background or market familiarity relevant for recruiting roles",
        },

        # Confidence and quality
        "confidence_scores": {
            "type": "object",
            "description": "Confidence level (0-100) for each extracted field, keyed by field name",
            "additionalProperties": {"type": "number", "minimum": 0, "maximum": 100},
        },
        "extraction_quality": {
            "type": "string",
            "enum": ["excellent", "good", "fair", "poor"],
            "description": "Overall quality of information available for extraction",
        },
        "missing_critical_info": _string_list(
            "Critical information that could not be extracted and should be gathered"
        ),
    },
    "required": ["name", "extraction_quality"],
}


ENHANCEMENT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "enhanced_summary": {
            "type": "string",
            "description": "Enhanced professional summary with strategic insights",
        },
        "competitive_positioning": {
            "type": "string",
            "description": "How they position in the recruiting market",
        },
        "hiring_potential": {"type": "string", "description": "What makes them an attractive hire"},
        "engagement_strategy": _string_list("Recommended approach for engaging this candidate"),
        "risk_factors": _string_list("Potential risks or challenges in hiring"),
        "value_proposition": _string_list("Unique value they would bring to a team"),
        "updated_likelihood_score": {
            "type": "number",
            "minimum": 0,
            "maximum": 100,
            "description": "Refined likelihood score based on deeper analysis",
        },
        "next_steps": _string_list("Recommended next steps for engaging this candidate"),
    },
}


def build_resume_prompt(text_content: str, filename: str, content_type: str) -> str:
    """Resume/CV extraction prompt."""
    return f"""You are an expert recruiter and talent analyst evaluating recruiting professionals.
Analyze this resume/CV with the precision of a senior recruiting director making hiring decisions.

CRITICAL FOCUS AREAS:
1. RECRUITING SPECIALIZATION: markets, industries, and seniority levels they focus on
2. PERFORMANCE INDICATORS: metrics, achievements, revenue numbers, placement success rates
3. TOOLS & METHODOLOGY: recruiting tools, platforms, and approaches
4. BUSINESS DEVELOPMENT: BD-focused or delivery-focused, how client-facing they are
5. CAREER TRAJECTORY: what their progression says about ambition and capability
6. MARKET POSITIONING: how they position themselves in the recruiting market

QUALITY STANDARDS:
- If information isn't clearly stated, leave the field out. Do not fabricate.
- For likelihood_score, consider career stage, recent changes, and satisfaction indicators.
- Give a confidence_scores entry (0-100) for every field you fill in.
- List missing critical information in missing_critical_info.

RESUME/CV CONTENT:
---
{text_content}
---

File name: {filename}
File type: {content_type}"""


def build_linkedin_prompt(markdown: str, profile_url: str, title: str | None, description: str | None) -> str:
    """LinkedIn profile extraction prompt."""
    return f"""You are analyzing the LinkedIn profile of a recruiting professional with the expertise
of a senior talent acquisition leader.

LINKEDIN-SPECIFIC ANALYSIS:
1. HEADLINE & SUMMARY: key specializations and value propositions
2. EXPERIENCE: progression, achievements, and recruiting metrics
3. SKILLS & ENDORSEMENTS: areas of expertise and peer recognition
4. RECOMMENDATIONS: performance indicators and client feedback
5. ACTIVITY & POSTS: thought leadership and market engagement

MOTIVATION ANALYSIS:
- Recent job changes or promotions may indicate satisfaction or dissatisfaction
- Career progression pattern suggests ambition and growth trajectory

Leave out anything the profile does not support. Give a confidence_scores entry (0-100)
for every field you fill in.

LINKEDIN PROFILE CONTENT:
---
{markdown}
---

Profile URL: {profile_url}
Page Title: {title or 'N/A'}
Meta Description: {description or 'N/A'}"""


def build_enhance_prompt(current: dict, raw_content: str, max_raw_chars: int = 3000) -> str:
    """Strategic enhancement prompt over an existing extraction."""
    excerpt = raw_content[:max_raw_chars]
    return f"""As a senior recruiting director, provide strategic insights about this recruiting
professional. Focus on actionable intelligence that would inform hiring and engagement decisions.

CURRENT ANALYSIS:
{json.dumps(current, indent=2, ensure_ascii=False)}

RAW CONTENT:
{excerpt}...

STRATEGIC ENHANCEMENT FOCUS:
1. COMPETITIVE POSITIONING: how do they stack up in the recruiting market?
2. HIRING POTENTIAL: what would make them an attractive hire?
3. ENGAGEMENT STRATEGY: what would motivate them to consider new opportunities?
4. RISK ASSESSMENT: what are the potential challenges or concerns?
5. VALUE PROPOSITION: what unique value do they bring to a recruiting team?"""
