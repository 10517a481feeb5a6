import logging
import os

from langchain_core.output_parsers import JsonOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from ...config import MODEL_CONFIG
from ...models.classification import LabeledFeedbackBatch
from ...utils.error_handling import create_error_response
from ..state import BatchState

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = """You are a customer feedback analyst.
You label each piece of customer feedback with a few short, reusable labels
such as product areas, sentiment, or request types.
Keep labels concise (one to three words) and consistent across items."""


def classify_batch(state: BatchState) -> dict:
    """Classify a batch of feedback lines using OpenAI."""
    if state.get("error"):
        return {}

    if not os.getenv("OPENAI_API_KEY"):
        return create_error_response("OPENAI_API_KEY environment variable not set")

    try:
        # JSON mode needs an object at the top level, hence the "items" wrapper
        llm = ChatOpenAI(
            model=str(MODEL_CONFIG["classification_model"]),
            temperature=float(MODEL_CONFIG["temperature"]),
            model_kwargs={"response_format": {"type": "json_object"}},
        )

        parser = JsonOutputParser(pydantic_object=LabeledFeedbackBatch)

        # Everything user supplied goes through variables so braces in
        # feedback text are never read as template fields
        prompt = ChatPromptTemplate.from_messages(
            [
                ("system", "{system_prompt}\n\n{format_instructions}"),
                ("user", "{prompt}"),
            ]
        )
        chain = prompt | llm | parser

        system_prompt = (state.get("system_instruction") or "").strip()
        result = chain.invoke(
            {
                "system_prompt": system_prompt or DEFAULT_SYSTEM_PROMPT,
                "format_instructions": parser.get_format_instructions(),
                "prompt": state["prompt"],
            }
        )

        logger.debug(f"Model returned {type(result).__name__} for {state.get('line_count', 0)} lines")
        return {"raw_response": result}

    except Exception as e:
        logger.error(f"Batch classification failed: {e}")
        return create_error_response(e)
