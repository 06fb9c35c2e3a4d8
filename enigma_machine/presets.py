# historical wirings, notches are not modelled
HISTORICAL_ROTORS = {   'I':    'EKMFLGDQVZNTOWYHXUSPAIBRCJ',
                        'II':   'AJDKSIRUXBLHWTMCQGZNPYFVOE',
                        'III':  'BDFHJLCPRTXVZNYEIWGAKMUSQO',
                        'IV':   'ESOVPZJAYQUIRHXLNFTGKDCMWB',
                        'V':    'VZBRGITYUPSDNHLXAWMJQOFECK',
                        'VI':   'JPGVOUMFYQBENHZRDKASXLICTW',
                        'VII':  'NZJHGRCXMYSWBOUFAIVLPEKQDT',
                        'VIII': 'FKQHTLXOCBJSPDZRAMEWNIUYGV',
                        'BETA': 'LEYJVCNIXWPBQMDRTAKZGFUHOS',
                        'GAMMA':'FSOKANUERHMBTIYCWLQPZXVGJD'}

HISTORICAL_REFLECTORS = {   'A':        'EJMZALYXVBWFCRQUONTSPIKHGD',
                            'B':        'YRUHQSLDPXNGOKMIEBFZCWVJAT',
                            'C':        'FVPJIAOYEDRZXWGCTKUQSBNMHL',
                            'B-THIN':   'ENKQAUYWJICOPBLMDXZVFTHRGS',
                            'C-THIN':   'RDOBJNTKVEHMLFCWZAXGYIPSUQ'}
