import yaml
from pathlib import Path
from typing import Optional
from ..config import get_settings

VERIFY_CLAIM_PROMPT = """You are a careful fact-checker. You will be given a CLAIM and one or more SOURCE TEXTS separated by '---'.
Decide whether the SOURCE TEXTS support the CLAIM, using only what the sources say.

Begin your answer with exactly one of these labels:
- Supported: the sources clearly state or directly imply the claim.
- Contradicted: the sources state something incompatible with the claim.
- Partially Supported: the sources support some parts of the claim but not all of it.
- Insufficient Evidence: the sources do not contain enough information to decide.

After the label, give a short justification that quotes or cites the specific passages you relied on.
Do not use outside knowledge. If the claim is only close to what the sources say, do not answer Supported."""

BUILTIN_PROMPTS = {
    "verify_claim": VERIFY_CLAIM_PROMPT,
}


def load_prompt(name: str, prompts_dir: Optional[str] = None) -> str:
    base = Path(prompts_dir or get_settings().PROMPTS_DIR)

    # Prioritize .yaml for structured prompts
    yaml_path = base / f"{name}.yaml"
    if yaml_path.exists():
        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f) or {}
            return data.get("content", "")

    # Fallback to .md
    md_path = base / f"{name}.md"
    if md_path.exists():
        with open(md_path, "r") as f:
            return f.read()

    if name in BUILTIN_PROMPTS:
        return BUILTIN_PROMPTS[name]

    raise FileNotFoundError(f"Prompt {name} not found as .yaml or .md")
