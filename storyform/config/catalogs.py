"""
Catalog literals for the story configuration form.

Values are shown to teachers verbatim, so they stay in Spanish and keep
their display order.
"""

# Genre mode: the character-driven story form
GENRES = (
    "Aventura",
    "Fantasía",
    "Misterio",
    "Ciencia Ficción",
    "Fábula",
    "Cuento Popular",
    "Biografía",
    "Histórico",
)

# Educational-context mode: the theme-driven story form
EDUCATIONAL_CONTEXTS = (
    "Convivencia escolar",
    "Cuidado del medio ambiente",
    "Identidad y diversidad cultural",
    "Alimentación saludable",
    "Ciudadanía y derechos del niño",
    "Emociones y autoestima",
    "Ciencia y tecnología",
    "Historia y tradiciones del Perú",
)

GRADE_LEVELS = (
    "Inicial (3-5 años)",
    "Primaria 1° (6 años)",
    "Primaria 2° (7 años)",
    "Primaria 3° (8 años)",
    "Primaria 4° (9 años)",
    "Primaria 5° (10 años)",
    "Primaria 6° (11 años)",
    "Secundaria 1° (12 años)",
    "Secundaria 2° (13 años)",
    "Secundaria 3° (14 años)",
    "Secundaria 4° (15 años)",
    "Secundaria 5° (16 años)",
)

PAGE_COUNT_BUCKETS = (
    "1-5 páginas",
    "6-10 páginas",
    "11-15 páginas",
    "16-20 páginas",
    "21+ páginas",
)

# Single-page mode counts whole pages one at a time
SINGLE_PAGE_BUCKETS = (
    "1 página",
    "2 páginas",
    "3 páginas",
    "4 páginas",
    "5 páginas",
)

COMPETENCES = (
    "Lee diversos tipos de textos escritos en su lengua materna",
    "Escribe diversos tipos de textos en su lengua materna",
    "Se comunica oralmente en su lengua materna",
    "Resuelve problemas de cantidad",
    "Construye su identidad",
    "Convive y participa democráticamente",
    "Construye interpretaciones históricas",
    "Gestiona responsablemente el espacio y el ambiente",
)

TRANSVERSAL_APPROACHES = (
    "Enfoque de Derechos",
    "Enfoque Inclusivo o de Atención a la Diversidad",
    "Enfoque Intercultural",
    "Enfoque Igualdad de Género",
    "Enfoque Ambiental",
    "Enfoque Orientación al Bien Común",
    "Enfoque Búsqueda de la Excelencia",
)

# Display labels for the skill checkboxes, keyed by skill name
SKILL_LABELS = {
    "literal_comprehension": "Comprensión literal",
    "inferential_comprehension": "Comprensión inferencial",
    "critical_comprehension": "Comprensión crítica",
    "thematic_vocabulary": "Vocabulario temático",
    "reading_strategies": "Estrategias de lectura",
}
