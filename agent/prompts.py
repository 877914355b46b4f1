NO_CITY_TOKEN = "NINGUNA"

CITY_EXTRACTION_PROMPT = (
    "Extrae SOLAMENTE el nombre de la ciudad de esta pregunta sobre clima. "
    f"Si no hay ciudad, responde '{NO_CITY_TOKEN}'. "
    "Pregunta: {question}\n"
    "Ciudad:"
)

WEATHER_ANSWER_PROMPT = (
    "Eres un asistente meteorológico amigable. "
    "Responde a la pregunta del usuario de forma natural y conversacional.\n\n"
    "Pregunta: {question}\n\n"
    "Datos del clima:\n{weather}\n\n"
    "Respuesta (usa emojis apropiados):"
)
