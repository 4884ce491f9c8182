"""Fixed reference vocabularies shared by the parser, extractor and evaluator.

These lists are job-independent: they drive generic signals
(breadth, "knows a mainstream stack"), while job-specific checks compare
against JobRequirements directly.
"""

# Technologies the raw-text parser recognizes in a skills section; also the
# universe for the evaluator's skill-breadth bonus.
CORE_TECH_SKILLS: tuple[str, ...] = (
    "JavaScript", "Python", "Java", "C++", "React", "Angular", "Vue", "Node.js",
    "SQL", "MongoDB", "AWS", "Azure", "Docker", "Kubernetes", "Git", "Linux",
    "HTML", "CSS", "TypeScript", "PHP", "Ruby", "Go", "Rust", "Swift", "Kotlin",
)

# Wider universe for the feature extractor's skill match percentage
BREADTH_SKILL_VOCABULARY: tuple[str, ...] = CORE_TECH_SKILLS + (
    "Redis", "GraphQL", "CI/CD", "Microservices", "REST",
)

# "Has a mainstream skill" reference list
REFERENCE_REQUIRED_SKILLS: tuple[str, ...] = (
    "JavaScript", "Python", "Java", "React", "Node.js", "SQL",
    "Git", "HTML", "CSS", "TypeScript", "AWS", "Docker",
)

REFERENCE_PREFERRED_SKILLS: tuple[str, ...] = (
    "Kubernetes", "MongoDB", "Redis", "GraphQL", "TypeScript",
    "Docker", "AWS", "Azure", "GCP", "CI/CD", "Microservices",
)

WELL_KNOWN_CERTIFICATIONS: tuple[str, ...] = (
    "AWS Certified", "Microsoft Certified", "Google Certified",
    "CISSP", "PMP", "Scrum Master",
)

# Title/description keywords that mark software-relevant experience
RELEVANT_EXPERIENCE_KEYWORDS: tuple[str, ...] = (
    "software", "developer", "engineer", "programmer", "coding",
    "web", "application", "system", "database", "frontend", "backend",
)

RELEVANT_EDUCATION_FIELDS: tuple[str, ...] = (
    "computer science", "software engineering", "information technology",
    "data science", "engineering", "mathematics", "physics",
)

# Head nouns and seniority words that mark a job title in raw text
JOB_TITLE_KEYWORDS: tuple[str, ...] = (
    "Engineer", "Developer", "Manager", "Analyst", "Specialist", "Coordinator",
    "Director", "Lead", "Senior", "Junior", "Principal", "Architect", "Consultant",
)
