"""
minicomp end-to-end example

Walks one program through every stage:
1. Tokenize the source
2. Build the AST
3. Traverse it with per-kind handlers
4. Transform to s-expression data
5. Generate source text again

Run: pip install -e . && python examples/demo.py
"""

from minicomp import NodeKind, generate_code, generate_ast, tokenize, transform, traverse

print("=== minicomp demo ===\n")

source = "(add 2 (subtract 40 2)) total (print 0)"

# 1. Tokenize
tokens = tokenize(source)
print(f"1. Tokenized {len(tokens)} tokens")
print("   " + " ".join(f"{t.kind.value}:{t.text}" for t in tokens) + "\n")

# 2. Parse
ast = generate_ast(tokens)
print(f"2. Parsed {len(ast.expressions)} top-level expressions\n")

# 3. Traverse, counting numbers per enclosing call
counts = {}


def count_number(node, parent):
    key = parent.value or parent.kind.value
    counts[key] = counts.get(key, 0) + 1


traverse(ast, {NodeKind.NUMBER_LITERAL: count_number})
print("3. Number literals per parent")
for parent, n in counts.items():
    print(f"   {parent}: {n}")
print()

# 4. Transform
tree = transform(ast)
print(f"4. Transformed: {tree}\n")

# 5. Generate
print(f"5. Generated:   {generate_code(tree)}")
