from logging import info, debug
from dataclasses import dataclass, replace
from functools import lru_cache
from numba import njit
from gmpy2 import mpz
from tqdm import tqdm
import numpy as np
import gmpy2
import math
import sys

MAX_NATIVE_INT = int(np.iinfo(np.int32).max)  # Digit bound meaning "no practical limit"
MAX_NATIVE_EXPONENT = int(np.iinfo(np.int32).max)  # Largest bit count GMP builds without aborting
NATIVE_TRIAL_LIMIT = 1 << 62  # Candidates up to here stay in int64 inside the kernel

HEADER = "Found Perfect Numbers:"

class ExponentOutOfRange(ValueError):

    def __init__(self, exponent):

        self.exponent = exponent
        super().__init__(f"Exponent {exponent} does not fit in [0, {MAX_NATIVE_EXPONENT}]")

@dataclass(frozen = True)
class Config:

    min_perfect: int = 1  # LLN
    max_perfect: int = 10000  # ULN
    min_perfect_digits: int = 1  # LLD, <= 0 disables the check
    max_perfect_digits: int = MAX_NATIVE_INT  # ULD, <= 0 disables the check
    min_exponent: int = 2  # LMPN
    max_exponent: int = 20  # UMPN
    min_mersenne_digits: int = 1  # LMPD
    max_mersenne_digits: int = 10  # UMPD
    limit: int = -1  # PNL, <= 0 means unbounded
    run: bool = True  # RUN, reserved and not read by the search

    def replace(self, **changes):

        return replace(self, **changes)

@njit
def _trial_division(n):

    root = int(math.sqrt(n))

    # Float estimate can be off by one either way
    while root * root > n:

        root -= 1

    while (root + 1) * (root + 1) <= n:

        root += 1

    for divisor in range(3, root + 1, 2):

        if n % divisor == 0:

            return False

    return True

def _trial_division_mpz(n):

    root = gmpy2.isqrt(n)
    divisor = mpz(3)

    while divisor <= root:

        if n % divisor == 0:

            return False

        divisor += 2

    return True

@lru_cache(maxsize = 65536)
def is_prime(n):

    if n <= 1: return False
    if n == 2: return True
    if n % 2 == 0: return False

    if n <= NATIVE_TRIAL_LIMIT:

        return bool(_trial_division(int(n)))

    return _trial_division_mpz(mpz(n))

def digit_count(value):

    return len(mpz(abs(value)).digits(10))

def _check_exponent(exponent):

    if exponent < 0 or exponent > MAX_NATIVE_EXPONENT:

        raise ExponentOutOfRange(exponent)

    return mpz(exponent)

def generate_mersenne_prime(exponent):

    return (mpz(1) << _check_exponent(exponent)) - 1

def is_valid_mersenne_prime(mersenne_prime, config):

    digits = digit_count(mersenne_prime)
    return config.min_mersenne_digits <= digits <= config.max_mersenne_digits

def generate_perfect_number(exponent, mersenne_prime):

    return (mpz(1) << _check_exponent(exponent - 1)) * mpz(mersenne_prime)

def is_valid_perfect_number(perfect_number, config):

    if not config.min_perfect <= perfect_number <= config.max_perfect: return False

    digits = digit_count(perfect_number)

    if config.min_perfect_digits > 0 and digits < config.min_perfect_digits: return False
    if config.max_perfect_digits > 0 and digits > config.max_perfect_digits: return False

    return True

def find_perfect_numbers(config = None, progress = False):

    if config is None: config = Config()

    perfect_numbers = []
    accepted_exponents = []
    found_count = 0
    n = mpz(config.min_exponent)
    total = max(int(config.max_exponent - config.min_exponent) + 1, 1)

    with tqdm(total = total, desc = "Testing exponents", disable = not progress) as bar:

        # The first exponent is always tested, even when it already exceeds the upper bound
        while True:

            if is_prime(n):

                mersenne_prime = generate_mersenne_prime(n)

                if is_valid_mersenne_prime(mersenne_prime, config):

                    perfect_number = generate_perfect_number(n, mersenne_prime)

                    if is_valid_perfect_number(perfect_number, config):

                        perfect_numbers.append(perfect_number)
                        accepted_exponents.append(n)
                        found_count += 1

            capped = config.limit > 0 and found_count >= config.limit
            n += 1
            bar.update(1)

            if capped or n > config.max_exponent: break

    for exponent, perfect_number in zip(accepted_exponents, perfect_numbers):

        debug(f"Perfect number accepted: 2^{exponent - 1} * (2^{exponent} - 1) = {perfect_number}")

    info(f"Search over exponents [{config.min_exponent}, {config.max_exponent}] found {found_count} perfect numbers")
    return list(perfect_numbers)

def display_perfect_numbers(perfect_numbers, stream = None):

    if stream is None: stream = sys.stdout

    print(HEADER, file = stream)

    for perfect_number in perfect_numbers:

        print(perfect_number, file = stream)
