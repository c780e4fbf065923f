import sys

from chord_symbols import ChordCorpus, DisplayStyle, Group, parse_chord

corpus = ChordCorpus.from_names(["C", "Cmaj7", "Cm7", "G7", "G7/B", "Dbm", "C#m7b5", "Fsus4"])

# Look up a chord by name
for chord in corpus.lookup("G7/B"):
    sys.stdout.write(chord.display(DisplayStyle.ACCESSIBLE) + "\n")  # "G seven/B"

# Filter by root and group; C# and Db are the same root
for chord in corpus.matching(root="Db", group=Group.MINOR):
    sys.stdout.write(f"{chord.name} -> {chord.display(DisplayStyle.ALT_SYMBOL)}\n")

# Qualities persist as raw tokens
chord = parse_chord("C6/9")
sys.stdout.write(f"{chord.quality.token!r} {chord.to_harte()}\n")  # '69' C:maj6(9)
