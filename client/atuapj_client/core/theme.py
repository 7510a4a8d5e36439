BASE = {
    # Fundo/containers (dark)
    "bg": "#0B1020",
    "panel": "#10192F",
    "border": "#22304D",

    # Texto
    "text": "#EAF0FF",
    "muted": "#9AA7C1",

    # Elementos (inputs, chips, botões)
    "chip": "#15223D",

    # Destaques
    "accent": "#3B82F6",
    "primary": "#4F46E5",  # indigo-600 (CTA da landing)
    "primary_hover": "#4338CA",
    "danger": "#EF4444",
}
