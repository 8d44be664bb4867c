"""dummy_resumes.py
Dummy resume texts (and generators) to use for testing.
"""

from resume_portfolio.test_helpers.mock_resume_generator import (
    MockResumeGenerator,
    ChunkValues,
    ChunkTemplates,
    DUMMY_RESUME_BLOCKS,
    DEFAULT_SECTION_ORDER,
)

# ---------------------------------------------------------------------------
# Setup dummy examples for testing
# ---------------------------------------------------------------------------

JANE_DOE_RESUME_TEXT = (
    "Jane Doe\n"
    "jane.doe@example.com | 555-123-4567\n"
    "\n"
    "Summary\n"
    "Product manager with 8 years of experience.\n"
    "\n"
    "Experience\n"
    "Acme Corp — Senior Product Manager (2019-2024)\n"
    "- Led a team of 8\n"
    "\n"
    "Skills\n"
    "Product Strategy, Figma, SQL\n"
)

# Plain prose: no resume keywords, headings, bullets or contact details
BROCHURE_TEXT = (
    "The harbor lights festival returns to the waterfront this autumn.\n"
    "Enjoy live music, local food stalls and fireworks over the bay each evening.\n"
    "Tickets go on sale next week at the box office and online.\n"
)

# Basic Resume with default values (0 for all options in DUMMY_RESUME_BLOCKS)
MOCK_RESUME_GENERATOR_0 = MockResumeGenerator(
    chunk_values=ChunkValues(
        name="John Doe",
        email="john.doe@example.com",
        phone="123-456-7890",
        linkedin_name="john_doe23",
        location="Greater New York",
        skills="Python, SQL, Power BI, sql",
        company_name="Comcast",
    ),
    chunk_templates=ChunkTemplates(
        contact_info=DUMMY_RESUME_BLOCKS["contact_info"][0],
        summary=DUMMY_RESUME_BLOCKS["summary"][0],
        work_experience=DUMMY_RESUME_BLOCKS["work_experience"][0],
        education=DUMMY_RESUME_BLOCKS["education"][0],
        projects=DUMMY_RESUME_BLOCKS["projects"][0],
        skills=DUMMY_RESUME_BLOCKS["skills"][0],
        achievements=DUMMY_RESUME_BLOCKS["achievements"][0],
        other=None,  # optional
    ),
    section_order=DEFAULT_SECTION_ORDER,
)

# Basic Resume with 1 for all DUMMY_RESUME_BLOCKS options and a scrambled order
MOCK_RESUME_GENERATOR_1 = MockResumeGenerator(
    chunk_values=ChunkValues(
        name="Carlos Mendez",
        email="c.mendez@company.net",
        phone="(512) 555-0199",
        linkedin_name="carlos-mendez",
        website="carlosmendez.io",
        skills="Zendesk; Salesforce; Jira",
        company_name="Initrode",
    ),
    chunk_templates=ChunkTemplates(
        contact_info=DUMMY_RESUME_BLOCKS["contact_info"][1],
        summary=DUMMY_RESUME_BLOCKS["summary"][1],
        work_experience=DUMMY_RESUME_BLOCKS["work_experience"][1],
        education=DUMMY_RESUME_BLOCKS["education"][1],
        projects=DUMMY_RESUME_BLOCKS["projects"][1],
        skills=DUMMY_RESUME_BLOCKS["skills"][1],
        achievements=DUMMY_RESUME_BLOCKS["achievements"][1],
    ),
    section_order=[
        "contact_info",
        "work_experience",
        "skills",
        "education",
        "summary",
        "projects",
        "achievements",
    ],
)

# Basic Resume with 2 for all DUMMY_RESUME_BLOCKS options and a scrambled order
MOCK_RESUME_GENERATOR_2 = MockResumeGenerator(
    chunk_values=ChunkValues(
        name="Alice Lee",
        email="alice.lee@example.co.uk",
        phone="+44 207-946-0958",
        linkedin_name="alicelee",
        location="Manchester, UK",
        skills="Go · Rust · Kubernetes",
        company_name="Hooli",
    ),
    chunk_templates=ChunkTemplates(
        contact_info=DUMMY_RESUME_BLOCKS["contact_info"][2],
        summary=DUMMY_RESUME_BLOCKS["summary"][2],
        work_experience=DUMMY_RESUME_BLOCKS["work_experience"][2],
        education=DUMMY_RESUME_BLOCKS["education"][2],
        projects=DUMMY_RESUME_BLOCKS["projects"][2],
        skills=DUMMY_RESUME_BLOCKS["skills"][2],
        achievements=DUMMY_RESUME_BLOCKS["achievements"][2],
    ),
    section_order=[
        "contact_info",
        "skills",
        "education",
        "work_experience",
        "projects",
        "summary",
        "achievements",
    ],
)


# Setup Test Persons to test with
MOCK_PERSONS = [
    {"name": "John Doe", "email": "john.doe@example.com", "linkedin_name": "john_doe"},
    {"name": "John E. Doe", "email": "j.e.doe@protonmail.com", "linkedin_name": "john-e-doe"},
    {"name": "John Edward Doe", "email": "jedward.doe@outlook.co.uk", "linkedin_name": "johnedwarddoe"},
    {"name": "John Doe-Smith", "email": "john.doe-smith@smithfamily.org", "linkedin_name": "john_doe_smith"},
    {"name": "María-José Carreño", "email": "mariajose.carreno@gmail.es", "linkedin_name": "maria-jose-carreno"},
    {"name": "Zhang Wei", "email": "zhang.wei@aliyun.cn", "linkedin_name": "zhangwei88"},
    {"name": "Mei-Ling Yi", "email": "mei.ling.yi@ntu.edu.sg", "linkedin_name": "mei-ling-yi"},
    {"name": "Oluwaseun Adeyemi", "email": "oluwaseun.a@lagosconnect.com", "linkedin_name": "oluwaseun-adeyemi"},
    {"name": "Ivan Ivanovich Petrov", "email": "ivan.petrov@ya.ru", "linkedin_name": "ivan-ivanovich-petrov"},
    {"name": "Anne-Marie O'Neill", "email": "annemarie.oneill@irishmail.ie", "linkedin_name": "anne-marie-oneill"},
    {"name": "Chloé Dubois", "email": "chloe.dubois@orange.fr", "linkedin_name": "chloe_dubois"},
    {"name": "Søren Kierkegaard", "email": "soren.kierkegaard@cph.dk", "linkedin_name": "soren-kierkegaard"},
    {"name": "Ji-hoon Park", "email": "jihoon.park@korea.kr", "linkedin_name": "jihoonpark_official"},
    {"name": "Priya Kaur Singh", "email": "priya.ks@outlook.in", "linkedin_name": "priya-kaur-singh"},
    {"name": "Fatima Al-Sayed", "email": "fatima.al.sayed@dubai.ae", "linkedin_name": "fatimaal-sayed"},
    {"name": "Daan van der Beek", "email": "daan.vanderbeek@kpn.nl", "linkedin_name": "daan-van-der-beek"},
    {"name": "Dr. Felicity Shaw", "email": "dr.felicity.shaw@nhs.uk", "linkedin_name": "dr-felicity-shaw"},
    {"name": "Michael Johnson Jr.", "email": "michael.johnsonjr@utexas.edu", "linkedin_name": "michael-johnson-jr"},
    {"name": "M. K. Gandhi", "email": "m.k.gandhi@freedom.org", "linkedin_name": "mk-gandhi"},
]
