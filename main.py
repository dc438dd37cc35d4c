from logging import info, exception, basicConfig, INFO
from perfects import Config, find_perfect_numbers, display_perfect_numbers
import time
import sys

SEARCH = Config(min_perfect = 1000,  # Perfect numbers >= 1000
                max_perfect = 100000,  # ... and <= 100000
                min_exponent = 2,
                max_exponent = 10,
                limit = 5)  # Stop after 5 perfect numbers

def main(config = SEARCH, stream = None):

    start_time = time.process_time()
    perfect_numbers = find_perfect_numbers(config)
    end_time = time.process_time()

    display_perfect_numbers(perfect_numbers, stream)

    info(f"Execution completed in {end_time - start_time:.2f} seconds")
    info(f"Perfect numbers found: {[int(p) for p in perfect_numbers]}")
    return perfect_numbers

if __name__ == "__main__":

    basicConfig(filename = "perfects.log",
                level = INFO,
                format = '%(asctime)s - %(levelname)s - %(message)s')

    try:

        main()

    except Exception as e:

        exception(f"An error occurred: {e}")
        sys.exit(1)
