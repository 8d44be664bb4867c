"""llm_client_test_helpers.py
Canned LLM responses used when an LLMClient runs in test mode.
"""
from typing import Literal
import json
import random
import uuid

from langchain_core.messages import AIMessage

expected_test_responses = {
    "analyze_resume": {
        "success": {
            "is_resume": True,
            "confidence": 0.92,
            "reason": "Contains work history, education and a skills list.",
            "candidate": {
                "name": "Jane Doe",
                "contact": {
                    "email": "jane.doe@example.com",
                    "phone": "555-123-4567",
                    "location": "Austin, TX",
                    "website": "janedoe.dev",
                    "linkedin": "linkedin.com/in/janedoe",
                    "github": None,
                    "links": [{"label": "Dribbble", "url": "https://dribbble.com/janedoe"}],
                },
                "summary": "Product manager with 8 years of experience.\njane.doe@example.com",
                "experience": [
                    {
                        "role": "Senior Product Manager",
                        "company": "Acme Corp",
                        "start": "2019",
                        "end": "2024",
                        "highlights": ["Led a team of 8"],
                    }
                ],
                "education": [
                    {
                        "institution": "State University",
                        "degree": "B.S. Computer Science",
                        "years": "2011 - 2015",
                        "details": [],
                    }
                ],
                "skills": ["Product Strategy", "Figma", "SQL"],
                "projects": [],
                "achievements": "Product of the Year 2022; Speaker at PMConf",
            },
        },
        "not_resume": {
            "is_resume": False,
            "confidence": 0.97,
            "reason": "The document is a product brochure.",
        },
        "unexpected_json": {"resume": "It's a great resume!"},
        "not_json": "It's an OK resume!",
    }
}


def create_mock_llm_response(
    function_name: Literal["analyze_resume"],
    provider: Literal["anthropic"],
    response_type: Literal["success", "not_resume", "unexpected_json", "not_json"] = "success"
) -> AIMessage:
    """
    Create a simulated AIMessage to mimic LLM responses with realistic structure per provider.
    """
    try:
        content_value = expected_test_responses[function_name][response_type]
    except KeyError:
        content_value = "Generic response"

    # Convert dict responses to JSON string; leave strings as-is
    content = json.dumps(content_value) if isinstance(content_value, dict) else content_value

    # --- token counts ---
    input_tokens = random.randint(500, 3000)
    output_tokens = random.randint(100, 800)
    total_tokens = input_tokens + output_tokens

    # --- build response metadata depending on provider ---
    if provider == "anthropic":
        response_metadata = {
            "id": str(uuid.uuid4()),
            "model": "claude-haiku-4-5",
            "stop_reason": "end_turn",
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "total_tokens": total_tokens
            }
        }
    else:
        raise ValueError(f"Unknown llm provider: {provider}")

    return AIMessage(
        content=content,
        additional_kwargs={},
        response_metadata=response_metadata,
        id=str(uuid.uuid4()),
        usage_metadata={
            "input_tokens": input_tokens,
            "output_tokens": output_tokens,
            "total_tokens": total_tokens
        }
    )
