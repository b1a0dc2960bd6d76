import asyncio, aioconsole, logging, virtcube, argparse

logging.basicConfig(level=logging.INFO)

parser = argparse.ArgumentParser()
parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible scrambles")
parser.add_argument("--duration", type=float, default=0.8, help="Seconds per move during playback")
parser.add_argument("--length", type=int, default=20, help="Default scramble length")
parser.add_argument("--timeout", type=float, default=30.0, help="Solver timeout in seconds")
parser.add_argument("--solver", choices=["inverse", "kociemba"], default="inverse", help="Solver used by the solve command")
args = parser.parse_args()

if args.debug: virtcube.LOGGER.setLevel(logging.DEBUG)

def print_net(state: virtcube.CubeState):
    def rows(face: virtcube.Face):
        f = state.face(face)
        return ["".join(c.value for c in f[i:i+3]) for i in range(0, 9, 3)]

    #Unfolded cross: U above, L F R B in the middle, D below
    for r in rows(virtcube.Face.U): print(" "*4 + r)
    for lr, fr, rr, br in zip(*(rows(f) for f in [virtcube.Face.L, virtcube.Face.F, virtcube.Face.R, virtcube.Face.B])):
        print(f"{lr} {fr} {rr} {br}")
    for r in rows(virtcube.Face.D): print(" "*4 + r)

def make_solver(cube: virtcube.VirtualCube) -> virtcube.SolverPort:
    if args.solver == "kociemba":
        from virtcube.kociemba_solver import KociembaSolver
        return KociembaSolver()
    return virtcube.InverseSolver(cube)

async def command_loop(cube: virtcube.VirtualCube):
    solver = make_solver(cube)
    progress: virtcube.SolutionProgress = None

    def move_cb(index: int, move: virtcube.Move, state: virtcube.CubeState):
        print(f"MOVE | {index+1:3d} | {str(move):2s} | {state}")
    def status_cb(status: virtcube.PlaybackStatus):
        print(f"PLAYBACK | {status.name}")
    def scramble_cb(moves):
        print(f"SCRAMBLE | {virtcube.format_sequence(moves)}")

    cube.register_move_handler(move_cb)
    cube.register_status_handler(status_cb)
    cube.register_scramble_handler(scramble_cb)

    while True:
        line = (await aioconsole.ainput("> ")).strip()
        cmd, _, arg = line.partition(" ")
        cmd, arg = cmd.lower(), arg.strip()

        try:
            if cmd == "h" or cmd == "help":
                print("(h)elp:          Shows this help text")
                print("(q)uit:          Exits the demo")
                print("show:            Prints the cube as an unfolded net")
                print("scramble [n]:    Scrambles the cube with n moves")
                print("apply <moves>:   Applies moves, e.g. R U R' U'")
                print("load <faces>:    Loads 6 scanned faces (F B L R U D, 9 colors each)")
                print("reset:           Resets the cube to solved")
                print("solve:           Solves the cube and plays the solution back")
                print("pause/resume:    Pauses or resumes playback")
                print("step/back:       Steps playback forward or backward")
                print("cancel:          Cancels playback")
                print("export [path]:   Prints or writes the solution transcript")
                print("done <n>:        Marks solution step n as done")
                print("(d)ebug:         Toggles debug logging")
            elif cmd == "q" or cmd == "quit":
                print("Exiting...")
                break
            elif cmd == "show":
                print_net(cube.state)
                print(f"solved: {cube.state.is_solved} | playback: {cube.playback.status.name}")
            elif cmd == "scramble":
                cube.scramble(int(arg) if arg else None)
            elif cmd == "apply":
                cube.apply(arg)
            elif cmd == "load":
                cube.load(arg)
            elif cmd == "reset":
                cube.reset()
                progress = None
            elif cmd == "solve":
                moves = await cube.solve(solver)
                progress = virtcube.SolutionProgress(moves)
                print(f"Solution ({len(moves)} moves, ~{progress.estimated_seconds}s): {progress.text}")
            elif cmd == "pause": cube.playback.pause()
            elif cmd == "resume" or cmd == "play": cube.playback.resume()
            elif cmd == "step": cube.playback.step()
            elif cmd == "back": cube.playback.previous()
            elif cmd == "cancel": cube.playback.cancel()
            elif cmd == "export":
                if not progress: print("No solution yet")
                elif arg: virtcube.write_transcript(progress.moves, arg)
                else: print(virtcube.format_transcript(progress.moves))
            elif cmd == "done":
                if not progress: print("No solution yet")
                else:
                    progress.mark_done(int(arg) - 1)
                    print(progress)
                    if progress.is_complete: print("All steps done, cube solved!")
            elif cmd == "d" or cmd == "debug":
                if virtcube.LOGGER.level != logging.DEBUG:
                    virtcube.LOGGER.setLevel(logging.DEBUG)
                    print("Enabled debug logging")
                else:
                    virtcube.LOGGER.setLevel(logging.INFO)
                    print("Disabled debug logging")
            else: print("Unknown command")
        except virtcube.CubeError as e: print(f"Error: {e}")
        except (ValueError, IndexError) as e: print(f"Invalid argument: {e}")

async def main():
    config = virtcube.Config(move_duration=args.duration, scramble_length=args.length, solver_timeout=args.timeout, seed=args.seed)
    cube = virtcube.VirtualCube(config, asyncio.get_running_loop())

    print("Virtual cube ready, type 'help' for commands")
    try: await command_loop(cube)
    finally: cube.playback.reset()

asyncio.run(main())
