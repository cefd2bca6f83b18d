import sys

from dotenv import load_dotenv

from paddydoc import PaddyDoc, render_text
from paddydoc.utils.openai_client import check_configuration

SAMPLE_RESPONSE = """Here is the analysis of the uploaded leaf:
1. **Disease Name**: Bacterial Leaf Blight
2. Severity: Moderate
3. Symptoms: Yellowing leaves with water-soaked lesions
Lesions start at the leaf tips and spread along the margins.
4. Recommended treatment: Apply copper-based bactericide
"""


def main() -> None:
    # Load environment variables from .env if present
    load_dotenv()

    doc = PaddyDoc()

    print("▶ Classifying a saved model response...")
    report = doc.diagnose(SAMPLE_RESPONSE)
    print(render_text(report))

    if len(sys.argv) < 2:
        return

    if not any(check_configuration().values()):
        raise RuntimeError(
            "No OpenAI configuration found. Set OPENAI_API_KEY, or AZURE_OPENAI_API_KEY "
            "and AZURE_OPENAI_ENDPOINT, in your environment or .env file."
        )

    print(f"\n▶ Analyzing {sys.argv[1]}...")
    print(render_text(doc.run(sys.argv[1])))


if __name__ == "__main__":
    main()
