# Valores centralizados para a UI (labels, ordens, etc.)

FORMATO_PADRAO = "dd/MM/yyyy"
FUSO_PADRAO = "America/Sao_Paulo"

# Formatos de data aceitos nas configurações
FORMATOS_DATA = [
    "dd/MM/yyyy",
    "MM/dd/yyyy",
    "yyyy-MM-dd",
]
FORMATO_LABELS = {
    "dd/MM/yyyy": "DD/MM/AAAA",
    "MM/dd/yyyy": "MM/DD/AAAA",
    "yyyy-MM-dd": "AAAA-MM-DD",
}

# Fusos horários (valor IANA, label)
FUSOS_HORARIOS = [
    ("America/Sao_Paulo", "São Paulo (UTC-3)"),
    ("America/Manaus", "Manaus (UTC-4)"),
    ("America/Rio_Branco", "Rio Branco (UTC-5)"),
    ("America/Fortaleza", "Fortaleza (UTC-3)"),
    ("America/Recife", "Recife (UTC-3)"),
    ("America/Bahia", "Bahia (UTC-3)"),
    ("America/Belem", "Belém (UTC-3)"),
    ("America/Campo_Grande", "Campo Grande (UTC-4)"),
    ("America/Cuiaba", "Cuiabá (UTC-4)"),
]
