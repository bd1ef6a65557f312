# Passphrase Generator
# Entropy-targeted passphrases from the OS CSPRNG or physical dice

__version__ = "1.0.0"

from .exceptions import (
    PassgenError,
    InvalidTarget,
    InvalidDiceSpec,
    InvalidRange,
    EmptyDictionary,
    EntropySourceFailure,
    DictionaryLoadError,
    ConfigurationError,
)

from .models import (
    EntropyTarget,
    DiceSpec,
    SampleResult,
    Passphrase,
    GeneratorConfig,
)

from .dictionary import (
    Dictionary,
    BuiltinDictionary,
    list_builtin,
    load_builtin,
    load_file,
)
from .entropy_source import CryptoRNG, DiceRNG, EntropySource, create_entropy_source
from .sample_size import SampleSizeCalculator
from .generator import PassphraseGenerator
from .report import build_report, crack_times, exact_decimal, human_duration, password_strength
from .dice_advisor import CandidateDice
from .prompts import DiceRollPrompt
from .logger import get_logger, setup_logging
from .main import create_argument_parser, create_config_from_args, main

__all__ = [
    '__version__',
    # Exceptions
    'PassgenError',
    'InvalidTarget',
    'InvalidDiceSpec',
    'InvalidRange',
    'EmptyDictionary',
    'EntropySourceFailure',
    'DictionaryLoadError',
    'ConfigurationError',
    # Models
    'EntropyTarget',
    'DiceSpec',
    'SampleResult',
    'Passphrase',
    'GeneratorConfig',
    # Dictionaries
    'Dictionary',
    'BuiltinDictionary',
    'list_builtin',
    'load_builtin',
    'load_file',
    # Entropy sources
    'EntropySource',
    'CryptoRNG',
    'DiceRNG',
    'create_entropy_source',
    # Core
    'SampleSizeCalculator',
    'PassphraseGenerator',
    # Report
    'build_report',
    'crack_times',
    'exact_decimal',
    'human_duration',
    'password_strength',
    # Dice
    'CandidateDice',
    'DiceRollPrompt',
    # Logger
    'get_logger',
    'setup_logging',
    # Main
    'create_argument_parser',
    'create_config_from_args',
    'main',
]
