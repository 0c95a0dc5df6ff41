import random
import unittest

from genestring import Field, Genestring, new_genestring, random_words


# Genome layout used by a toy genetic-algorithm host.
GENOME = [
    Field(0, 12),     # speed
    Field(12, 60),    # straddles words 0 and 1
    Field(72, 64),    # straddles words 1 and 2
    Field(136, 120),  # wide, needs transplant
]
GENOME_BITS = 256


def crossover(mother: Genestring, father: Genestring, cut: int) -> Genestring:
    child = mother.copy()
    child.transplant(father, cut, GENOME_BITS - cut)
    return child


def mutate(genes: Genestring, rng: random.Random, rate: float = 0.1):
    for field in GENOME:
        if field.bits > 64 or rng.random() >= rate:
            continue
        genes.set_field(field, genes.get_field(field) ^ 1)


class TestGeneticHost(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.rng = random.Random(2024)

    def test_crossover_splits_at_cut(self):
        mother = new_genestring(GENOME_BITS, random_words(self.rng))
        father = new_genestring(GENOME_BITS, random_words(self.rng))

        for cut in (0, 1, 63, 64, 65, 130, 255, 256):
            child = crossover(mother, father, cut)
            if cut:
                self.assertEqual(child.get(0, min(cut, 64)), mother.get(0, min(cut, 64)))
            for position in range(GENOME_BITS):
                parent = mother if position < cut else father
                self.assertEqual(child.get(position, 1), parent.get(position, 1), (cut, position))

    def test_population_evolves_without_corruption(self):
        population = [new_genestring(GENOME_BITS, random_words(self.rng)) for _ in range(8)]
        for _ in range(20):
            mother, father = self.rng.sample(population, 2)
            child = crossover(mother, father, self.rng.randrange(GENOME_BITS + 1))
            mutate(child, self.rng)
            population[self.rng.randrange(len(population))] = child

        for genes in population:
            self.assertEqual(genes.word_len, 4)
            for field in GENOME[:3]:
                self.assertLess(genes.get_field(field), 1 << field.bits)


if __name__ == "__main__":
    unittest.main()
