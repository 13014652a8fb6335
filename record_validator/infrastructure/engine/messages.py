"""Default messages of the built-in rules, per language.

Templates are ``str.format`` strings: ``{field}`` is the field label and
``{0}``, ``{1}``... are the rule's positional parameters.
"""

from __future__ import annotations

BUILTIN_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "required": "{field} is required",
        "equals": "{field} must be the same as '{0}'",
        "different": "{field} must be different than '{0}'",
        "accepted": "{field} must be accepted",
        "numeric": "{field} must be numeric",
        "integer": "{field} must be an integer",
        "boolean": "{field} must be a boolean",
        "length": "{field} must be {0} characters long",
        "lengthBetween": "{field} must be between {0} and {1} characters",
        "lengthMin": "{field} must be at least {0} characters long",
        "lengthMax": "{field} must not exceed {0} characters",
        "min": "{field} must be at least {0}",
        "max": "{field} must be no more than {0}",
        "between": "{field} must be between {0} and {1}",
        "in": "{field} contains invalid value",
        "notIn": "{field} contains invalid value",
        "email": "{field} is not a valid email address",
        "url": "{field} is not a valid URL",
        "alpha": "{field} must contain only letters a-z",
        "alphaNum": "{field} must contain only letters a-z and/or numbers 0-9",
        "slug": "{field} must contain only letters a-z, numbers 0-9, dashes and underscores",
        "regex": "{field} contains invalid characters",
    },
    "fr": {
        "required": "{field} est obligatoire",
        "equals": "{field} doit être identique à '{0}'",
        "different": "{field} doit être différent de '{0}'",
        "accepted": "{field} doit être accepté",
        "numeric": "{field} doit être numérique",
        "integer": "{field} doit être un entier",
        "boolean": "{field} doit être un booléen",
        "length": "{field} doit contenir {0} caractères",
        "lengthBetween": "{field} doit contenir entre {0} et {1} caractères",
        "lengthMin": "{field} doit contenir au moins {0} caractères",
        "lengthMax": "{field} ne doit pas dépasser {0} caractères",
        "min": "{field} doit être supérieur ou égal à {0}",
        "max": "{field} doit être inférieur ou égal à {0}",
        "between": "{field} doit être compris entre {0} et {1}",
        "in": "{field} contient une valeur non valide",
        "notIn": "{field} contient une valeur non valide",
        "email": "{field} n'est pas une adresse email valide",
        "url": "{field} n'est pas une URL valide",
        "alpha": "{field} doit contenir uniquement les lettres a-z",
        "alphaNum": "{field} doit contenir uniquement des lettres de a-z et/ou des chiffres 0-9",
        "slug": "{field} doit contenir uniquement des lettres a-z, des chiffres 0-9, des tirets et des traits soulignés",
        "regex": "{field} contient des caractères non valides",
    },
    "de": {
        "required": "{field} ist erforderlich",
        "equals": "{field} muss identisch mit '{0}' sein",
        "different": "{field} muss sich von '{0}' unterscheiden",
        "accepted": "{field} muss markiert sein",
        "numeric": "{field} muss eine Zahl sein",
        "integer": "{field} muss eine ganze Zahl sein",
        "boolean": "{field} muss ein Wahrheitswert sein",
        "length": "{field} muss {0} Zeichen lang sein",
        "lengthBetween": "{field} muss zwischen {0} und {1} Zeichen lang sein",
        "lengthMin": "{field} muss mindestens {0} Zeichen lang sein",
        "lengthMax": "{field} darf maximal {0} Zeichen lang sein",
        "min": "{field} muss mindestens {0} sein",
        "max": "{field} darf maximal {0} sein",
        "between": "{field} muss zwischen {0} und {1} liegen",
        "in": "{field} enthält einen ungültigen Wert",
        "notIn": "{field} enthält einen ungültigen Wert",
        "email": "{field} ist keine gültige E-Mail-Adresse",
        "url": "{field} ist keine gültige URL",
        "alpha": "{field} darf nur Buchstaben a-z enthalten",
        "alphaNum": "{field} darf nur Buchstaben a-z und/oder Ziffern 0-9 enthalten",
        "slug": "{field} darf nur Buchstaben a-z, Ziffern 0-9, Binde- und Unterstriche enthalten",
        "regex": "{field} enthält ungültige Zeichen",
    },
}
