def format_status(status):
    """Plugboard, one line per rotor, then the reflector."""
    lines = ['plugboard: ' + '  '.join('{} <-> {}'.format(*p) for p in status['plugboard'])]

    for i, rotor in enumerate(status['rotors']):
        lines.append('rotor {:2d}: {} pos = {:2d} ({})'.format(
            i, rotor['wiring'], rotor['position'], rotor['window']))

    lines.append('reflector: ' + '  '.join('{}<->{}'.format(*p) for p in status['reflector']))
    return '\n'.join(lines)
