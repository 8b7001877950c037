import unittest

from typeguard import TypeCheckError

from flashdeck.flashcard import Flashcard


class TestFlashcard(unittest.TestCase):
    def test_new_card_has_no_mistakes(self):
        card = Flashcard("Definition1")
        self.assertEqual(card.definition, "Definition1")
        self.assertEqual(card.mistakes, 0)

    def test_attributes_are_writable(self):
        card = Flashcard("Definition1")
        card.definition = "Changed"
        card.mistakes = 5
        self.assertEqual(card, Flashcard("Changed", 5))

    def test_record_mistake_and_reset(self):
        card = Flashcard("Definition1", 2)
        self.assertEqual(card.record_mistake(), 3)
        card.reset()
        self.assertEqual(card.mistakes, 0)

    def test_constructor_rejects_wrong_types(self):
        with self.assertRaises(TypeCheckError):
            Flashcard(42)
        with self.assertRaises(TypeCheckError):
            Flashcard("Definition1", "3")


if __name__ == '__main__':
    unittest.main()
