"""Prompt templates for the external symptom analysis call."""

NOT_PROVIDED = "Not provided"

ANALYSIS_SYSTEM = """\
You are an AI medical assistant providing preliminary, educational health analysis.
You are not a doctor and you never give a diagnosis.
Output ONLY valid JSON (no markdown fences, no commentary)."""

ANALYSIS_USER = """\
Based on the provided information, analyze the symptoms and provide potential \
conditions with confidence levels.

Patient Information:
- Age: {age}
- Gender: {gender}
- Weight: {weight}
- Height: {height}

Symptoms: {symptoms}

Respond with exactly this JSON structure:
{{
  "conditions": [
    {{
      "name": "Condition Name",
      "confidence": 85,
      "description": "Brief description of the condition",
      "severity": "low|medium|high",
      "symptoms": ["symptom1", "symptom2"],
      "recommendations": ["recommendation1", "recommendation2"]
    }}
  ],
  "summary": "A brief summary of the analysis",
  "nextSteps": ["Step 1", "Step 2", "Step 3"]
}}

Guidelines:
1. Provide 3-5 potential conditions based on the symptoms.
2. Confidence must be an integer between 60 and 95.
3. Severity must be exactly one of "low", "medium" or "high" and realistic for the symptoms.
4. Recommendations must be practical and safe. Do not include prescriptions or dosages.
5. Be conservative in your analysis and avoid alarming predictions.
6. Include common conditions that match the symptoms.
7. List nextSteps in the order the patient should follow them.

Important: State in the summary that this is a preliminary analysis, not medical \
advice, and that the patient should consult a healthcare professional."""


def _field(value: object, unit: str | None = None) -> str:
    if value is None:
        return NOT_PROVIDED
    text = str(value).strip()
    if not text:
        return NOT_PROVIDED
    return f"{text} {unit}" if unit else text


def build_prompt(
    symptoms: str,
    age: object = None,
    gender: object = None,
    weight: object = None,
    height: object = None,
) -> str:
    """Render the analysis request for one patient."""
    return ANALYSIS_USER.format(
        age=_field(age),
        gender=_field(gender),
        weight=_field(weight, "kg"),
        height=_field(height, "cm"),
        symptoms=symptoms.strip() if isinstance(symptoms, str) else "",
    )
