"""Constants for the Wordnik API client."""

__version__ = "0.1.0"

DEFAULT_API_HOST = "api.wordnik.com"
DEFAULT_API_PORT = 443
DEFAULT_API_VERSION = "v4"
DEFAULT_TIMEOUT_SECONDS = 30.0

ENV_API_KEY = "WORDNIK_API_KEY"
CONFIG_FILE_NAME = ".wordnik.yml"

API_KEY_PARAM = "api_key"

WORD_AUDIO_ENDPOINT = "word.json/{word}/audio"
WORD_DEFINITIONS_ENDPOINT = "word.json/{word}/definitions"
WORD_ETYMOLOGIES_ENDPOINT = "word.json/{word}/etymologies"
WORD_EXAMPLES_ENDPOINT = "word.json/{word}/examples"
WORD_FREQUENCY_ENDPOINT = "word.json/{word}/frequency"
WORD_HYPHENATION_ENDPOINT = "word.json/{word}/hyphenation"
WORD_PHRASES_ENDPOINT = "word.json/{word}/phrases"
WORD_PRONUNCIATIONS_ENDPOINT = "word.json/{word}/pronunciations"
WORD_RELATED_WORDS_ENDPOINT = "word.json/{word}/relatedWords"
WORD_SCRABBLE_SCORE_ENDPOINT = "word.json/{word}/scrabbleScore"
WORD_TOP_EXAMPLE_ENDPOINT = "word.json/{word}/topExample"
RANDOM_WORD_ENDPOINT = "words.json/randomWord"
RANDOM_WORDS_ENDPOINT = "words.json/randomWords"
WORD_OF_THE_DAY_ENDPOINT = "words.json/wordOfTheDay"

# Filters the API expects as a single comma-joined string.
CSV_PARAMS = frozenset(
    {
        "part_of_speech",
        "include_part_of_speech",
        "exclude_part_of_speech",
        "source_dictionaries",
        "relationship_types",
    }
)

DEFAULT_RELATED_LIMIT = 10

RELATIONSHIP_RHYME = "rhyme"
RELATIONSHIP_ANTONYM = "antonym"
RELATIONSHIP_SYNONYM = "synonym"
RELATIONSHIP_HYPERNYM = "hypernym"
RELATIONSHIP_HYPONYM = "hyponym"
RELATIONSHIP_EQUIVALENT = "equivalent"
