from tests._RandomGenerator import RandomGenerator
