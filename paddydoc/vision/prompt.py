DIAGNOSIS_PROMPT = (
    "Analyze this paddy (rice) plant image and identify if there are any diseases. "
    "If a disease is present, provide the following information: "
    "1) Disease name, 2) Severity (mild, moderate, severe), "
    "3) Brief description of symptoms, 4) Recommended treatment. "
    "If the plant appears healthy, just state that it looks healthy."
)
