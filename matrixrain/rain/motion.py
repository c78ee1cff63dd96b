# deslocamento vertical de uma coluna no instante t

def column_offset(t: float, speed: float, full_height: float, measured_height: float) -> float:
    """
    ((t * speed) mod (full_height + measured_height)) - measured_height

    Começa toda acima da tela (-measured_height), desce até sair por baixo e
    volta pro topo sem emenda. Resultado sempre em [-measured_height, full_height).
    """
    period = full_height + measured_height
    if period <= 0:
        return -measured_height
    phase = (t * speed) % period
    if phase >= period:  # arredondamento de float com t negativo
        phase = 0.0
    return phase - measured_height
