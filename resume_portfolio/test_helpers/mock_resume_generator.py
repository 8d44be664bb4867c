"""mock_resume_generator.py
Outputs plain-text resumes that simulate FileParser.parse() outputs.
"""
from dataclasses import dataclass
from typing import List, Optional
import copy

DEFAULT_SECTION_ORDER = [
    "contact_info",
    "summary",
    "work_experience",
    "education",
    "projects",
    "skills",
    "achievements",
]

# -------------------------------------------------------------------------
# DUMMY RESUME BLOCKS (to construct resumes from)
# -------------------------------------------------------------------------

DUMMY_RESUME_BLOCKS = {
    # ---------------------------------------------------------
    # CONTACT INFO BLOCKS
    # First example is the default used
    # ---------------------------------------------------------
    "contact_info": [
        "{name}\n"
        "{email} | {phone} | linkedin.com/in/{linkedin_name}\n"
        "Location: {location}",

        "{name} Email: {email} Phone: {phone} LinkedIn: linkedin.com/in/{linkedin_name}\n"
        "Website: https://www.{website}",

        "{name_upper}\n"
        "{phone} · {email} · github.com/{linkedin_name}\n"
        "Designer based in {location}",
    ],

    # ---------------------------------------------------------
    # SUMMARY BLOCKS
    # ---------------------------------------------------------
    "summary": [
        "SUMMARY\n"
        "Product-minded data scientist who turns messy data\n"
        "into clear decisions.",

        "Profile:\n"
        "Customer support lead focused on fast, friendly resolutions.",

        "About\n"
        "Early childhood educator and curriculum designer.",
    ],

    # ---------------------------------------------------------
    # WORK EXPERIENCE BLOCKS
    # ---------------------------------------------------------
    "work_experience": [
        "WORK EXPERIENCE\n"
        "Data Scientist | {company_name} | March 2021 - Present\n"
        "• Pioneered segmentation in Google Analytics 4, leading to 3 successful campaigns.\n"
        "• Built churn models used by the retention team.\n"
        "\n"
        "Analyst | Globex | June 2018 - February 2021\n"
        "• Automated weekly reporting.",

        "Employment History\n"
        "Director of Product Management, {company_name}, 2018 - 2024\n"
        "- Streamlined customer support process, boosting satisfaction ratings by 27%.\n"
        "Support Specialist, Initech, 2015 - 2018\n"
        "- Answered 60 tickets a day.",

        "Experience\n"
        "SeniorEngineer at {company_name}\n"
        "Tech stack: Python, Go\n"
        "- Scaled the billing service",
    ],

    # ---------------------------------------------------------
    # EDUCATION BLOCKS
    # ---------------------------------------------------------
    "education": [
        "EDUCATION\n"
        "San Diego State University\n"
        "M.S. Computer Science\n"
        "2016 - 2018",

        "Education\n"
        "• The Collegiate School\n"
        "• High school diploma\n"
        "\n"
        "• Richmond Community College",

        "Academic Background\n"
        "University of Texas at San Antonio – M.A. English",
    ],

    # ---------------------------------------------------------
    # PROJECTS BLOCKS
    # ---------------------------------------------------------
    "projects": [
        "PROJECTS\n"
        "h2oFiltration\n"
        "• Designed a water filtration system for rural schools\n"
        "•\n"
        "\n"
        "ResumeBot\n"
        "• Parses resumes into portfolios\n"
        "• Ships as a CLI",

        "Selected Projects\n"
        "Community Garden App",

        "Project Highlights\n"
        "- Editor / Cultural Studies / San Antonio, TX",
    ],

    # ---------------------------------------------------------
    # SKILLS BLOCKS (FILLABLE)
    # ---------------------------------------------------------
    "skills": [
        "SKILLS\n"
        "{skills}",

        "Key Skills:\n"
        "Languages: {skills}",

        "Technical Skills\n"
        "• {skills}",
    ],

    # ---------------------------------------------------------
    # ACHIEVEMENTS BLOCKS
    # ---------------------------------------------------------
    "achievements": [
        "ACHIEVEMENTS\n"
        "• Grew annual revenue by 11%;\n"
        "• Speaker at PyData 2022:",

        "Awards\n"
        "Employee of the Year",

        "Recognitions\n"
        "- Dean's List",
    ],
}


# -------------------------------------------------------------------------
# MockResumeGenerator INPUT DATA MODELS
# -------------------------------------------------------------------------
@dataclass
class ChunkValues:
    """
    Holds fillable field values that can be overridden when
    generating a mock resume. These represent the variable parts
    of the text templates (e.g., name, email, skills).

    Attributes:
        name: Default person name.
        email: Default email address.
        phone: Default phone number.
        linkedin_name: LinkedIn (and GitHub) profile slug.
        location: Default location.
        website: Personal website host (without scheme).
        skills: Default skills text for insertion into the skills block.
        company_name: Default company name for work experience.
    """
    name: str = "John Doe"
    email: str = "john.doe@example.com"
    phone: str = "123-456-7890"
    linkedin_name: str = "john_doe23"
    location: str = "Greater New York"
    website: str = "johndoe.dev"
    skills: str = "Python, SQL, Power BI, sql"
    company_name: str = "Comcast"

@dataclass
class ChunkTemplates:
    """
    Defines the text templates used to render each section of the
    resume. Each template can include placeholders compatible with
    Python's `str.format()` syntax, such as `{name}` or `{skills}`.
    """
    contact_info: str = DUMMY_RESUME_BLOCKS["contact_info"][0]
    summary: str = DUMMY_RESUME_BLOCKS["summary"][0]
    work_experience: str = DUMMY_RESUME_BLOCKS["work_experience"][0]
    education: str = DUMMY_RESUME_BLOCKS["education"][0]
    projects: str = DUMMY_RESUME_BLOCKS["projects"][0]
    skills: str = DUMMY_RESUME_BLOCKS["skills"][0]
    achievements: str = DUMMY_RESUME_BLOCKS["achievements"][0]
    other: Optional[str] = None  # optional, only used if provided

# -------------------------------------------------------------------------
# Main generator class
# -------------------------------------------------------------------------
class MockResumeGenerator:
    """
    Generate realistic mock resumes for testing purposes.

    This class builds a resume from predefined templates and values,
    substitutes fillable fields like name, email, phone, LinkedIn username,
    and skills, and joins the sections with blank lines.

    Attributes:
        chunk_values (ChunkValues): Fillable field values for substitution.
        chunk_templates (ChunkTemplates): Templates for each resume section.
        section_order (List[str]): The sequence of sections to include.
    """

    def __init__(
        self,
        chunk_values: Optional[ChunkValues] = None,
        chunk_templates: Optional[ChunkTemplates] = None,
        section_order: Optional[List[str]] = None,
    ):
        self.chunk_values = chunk_values or ChunkValues()
        self.chunk_templates = chunk_templates or ChunkTemplates()
        self.section_order = DEFAULT_SECTION_ORDER if section_order is None else section_order

    def _render(self, template: Optional[str]) -> str:
        """Fill a template with `chunk_values` (unknown placeholders leave it raw)."""
        if not template:
            return ""
        values = vars(self.chunk_values)
        try:
            return template.format(name_upper=self.chunk_values.name.upper(), **values)
        except KeyError:
            return template

    # ----------------------
    # Public interface
    # ----------------------
    def generate(self) -> str:
        """
        Build the resume text.

        Returns:
            str: Resume text, sections separated by a blank line.
        """
        assembled_parts = []
        for section in self.section_order:
            rendered = self._render(getattr(self.chunk_templates, section, None))
            # Always skip empty sections (e.g. "other" when not provided)
            if rendered:
                assembled_parts.append(rendered)

        return "\n\n".join(assembled_parts) + ("\n" if assembled_parts else "")

    def generate_bytes(self, encoding: str = "utf-8") -> bytes:
        """Build the resume and encode it (input for PlainTextParser / parse_resume)."""
        return self.generate().encode(encoding)

    def clone(
        self,
        chunk_values: Optional["ChunkValues"] = None,
        chunk_templates: Optional["ChunkTemplates"] = None,
        section_order: Optional[List[str]] = None,
    ) -> "MockResumeGenerator":
        """
        Create a copy of this generator, optionally overriding specific attributes.

        Returns:
            MockResumeGenerator: A new generator with the requested overrides.
        """
        new_gen = copy.deepcopy(self)
        if chunk_values is not None:
            new_gen.chunk_values = chunk_values
        if chunk_templates is not None:
            new_gen.chunk_templates = chunk_templates
        if section_order is not None:
            new_gen.section_order = section_order
        return new_gen
