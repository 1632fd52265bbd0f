# utilitarios

Small, dependency-free helpers for command-line programs.

| Module | What it offers |
| --- | --- |
| `utilitarios.legivel` | Human-readable sizes, quantities and durations: `tamanho_legivel`, `valor_legivel`, `tempo_legivel`, `elimina_digitos_insignificantes`. |
| `utilitarios.booleano` | Truth values as text: `str_to_bool`, `bool_to_str`, `null_to_str`. |
| `utilitarios.menu` | Guessing the kind of a command-line value: `Tipo`, `tipo_to_str`, `identifica_valor`, `extrai_valor`. |
| `utilitarios.ponto` | Integer screen coordinates: `Ponto`, `retangulo_vertices`, `pontos_colineares`, `cria_array_ponto`, `array_ponto_to_str`, `imprime_array_ponto`. |
| `utilitarios.terminal` | Terminal size: `obtem_dimensao`, `TerminalSize`, and the helper `find`. |
| `utilitarios.tempo` | Time magnitudes and pauses: `TempoTipo`, `Duracao`, `breve_pausa`, `centesima_unidade`, `transforma_para_nanoseg`, `reducao_de_grandeza`, `potencia`, `tempotipo_str`, `sufixo_do_tempotipo`. |
| `utilitarios.cronometro` | A stopwatch that records marks: `Cronometro`, `instancias_cronometro`. |
| `utilitarios.temporizador` | A countdown timer that runs in a background thread: `Temporizador`, `instancias_temporizador`. |
| `utilitarios.progresso` | Text progress bars: `ProgressoSimples`, `ProgressoTemporal`, `TipoDeProgresso`, `cria_bp`, `cria_barra`. |
| `utilitarios.teste` | A tiny runner for manual test routines: `TesteConfig`, `unit`, `executa_tst`, `executa_testes`, `executa_testes_a`, `executa_testes_b`, `execucao_serial_de_tc`, `debug_aqui`. |

## Installation

```
pip install .
```

## Examples

Readable values:

```python
from utilitarios.legivel import tamanho_legivel, valor_legivel, tempo_legivel
from utilitarios.booleano import str_to_bool

print(tamanho_legivel(3842394))   # binary multiples: KiB, MiB, GiB, TiB
print(valor_legivel(3842394))     # short-scale weights: mil, mi, bi, ...
print(tempo_legivel(8328.0))      # largest fitting unit, from ns to milênios
print(str_to_bool("Verdadeiro"))  # True; unknown words raise ValueError
```

Guessing the type of an argument:

```python
from utilitarios.menu import identifica_valor, extrai_valor

identifica_valor("15.32")   # Tipo.Decimal
extrai_valor("3812")        # 3812
extrai_valor("false")       # False
```

Points on the screen:

```python
from utilitarios.ponto import Ponto, retangulo_vertices

vertices = retangulo_vertices(Ponto(5, 10), Ponto(8, 19))
print([str(v) for v in vertices])
```

Stopwatch and countdown timer, both usable as context managers:

```python
from utilitarios.cronometro import Cronometro
from utilitarios.temporizador import Temporizador
from utilitarios.tempo import TempoTipo

with Cronometro() as relogio:
    relogio.marca()
    print(relogio)

with Temporizador(TempoTipo.Segundo, 2) as timer:
    timer.aguarda()
    print(timer, timer.esgotado())
```

Progress bar:

```python
from utilitarios.progresso import ProgressoSimples

barra = ProgressoSimples(100)
for k in range(1, 101):
    barra.atualiza_e_visualiza(k)
```

Running manual test routines:

```python
from utilitarios.teste import unit, executa_testes_b

def exemplo():
    print("olá")

executa_testes_b(True, unit(exemplo, True))
```

## Notes and limits

- `obtem_dimensao` runs `tput cols lines` outside Windows and raises
  `RuntimeError` if that fails; on Windows it asks the standard library.
- `breve_pausa` accepts at most 1000 units; `Temporizador` accepts fewer than
  1000 units and at most 255 open timers.
- The runner in `utilitarios.teste` prints headers and a summary; it does not
  catch or report failures, so an exception raised by a routine propagates.
- The package is a library only: it installs no command-line program.

## Running the tests

```
pip install .[test]
pytest
```