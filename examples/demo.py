from booleanomial import variable
from rich import print

a = variable(8, 0)
b = variable(8, 1)
c = variable(8, 2)

print(f"~a\n    = ({~a})")
print(f"a & b\n    = ({a & b})")
print(f"b | a\n    = ({a | b})")
print(f"a ^ b\n    = ({a ^ b})")
print(f"a & (b | c)\n    = ({(b | c) & a})")
print(f"S = a ^ (b ^ c)\n    = ({a ^ b ^ c})")

cout = (a & b) | (c & (a ^ b))
print(f"cout = (a & b) | (c & (a ^ b))\n    = ({cout})")
cout.build_output_table().pretty()
